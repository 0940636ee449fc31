"""Chart of one sort run: values before/after and swaps per outer pass."""

import itertools
import logging
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from .driver import RunResult

logger = logging.getLogger(__name__)


def plot_run(result: RunResult, output_file) -> Path:
    """Save a two-panel chart for ``result`` and return the output path.

    Top panel: value at each index before and after sorting.
    Bottom panel: swaps per outer pass, with the running total on a second
    y-axis.
    """
    trace = result.trace
    indices = list(range(len(result.before)))

    fig, (ax_values, ax_swaps) = plt.subplots(2, 1, figsize=(12, 9))

    ax_values.plot(indices, result.before, 'o', color='tab:gray', markersize=4,
                   alpha=0.7, label='Before')
    ax_values.plot(indices, result.after, '-', color='tab:blue', linewidth=2,
                   label='After')
    ax_values.set_xlabel('Index', fontsize=12)
    ax_values.set_ylabel('Value', fontsize=12)
    ax_values.grid(True, alpha=0.3)
    ax_values.legend(loc='upper right')
    ax_values.set_title('Values Before and After Sorting', fontsize=14, fontweight='bold')

    cumulative = list(itertools.accumulate(trace.swaps_per_pass))

    passes = list(range(len(trace.swaps_per_pass)))
    color1 = 'tab:orange'
    ax_swaps.bar(passes, trace.swaps_per_pass, color=color1, alpha=0.7)
    ax_swaps.set_xlabel('Outer index (j)', fontsize=12)
    ax_swaps.set_ylabel('Swaps in pass', color=color1, fontsize=12)
    ax_swaps.tick_params(axis='y', labelcolor=color1)
    ax_swaps.grid(True, alpha=0.3)

    ax_total = ax_swaps.twinx()
    color2 = 'tab:purple'
    ax_total.plot(passes, cumulative, '--', color=color2, linewidth=2)
    ax_total.set_ylabel('Total swaps', color=color2, fontsize=12)
    ax_total.tick_params(axis='y', labelcolor=color2)
    ax_swaps.set_title(
        f'Swaps per Pass ({trace.comparisons} comparisons, {trace.swaps} swaps)',
        fontsize=14, fontweight='bold'
    )

    fig.tight_layout()

    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close(fig)

    logger.info("Plot saved to: %s", output_path)
    return output_path
