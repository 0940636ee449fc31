import io

import pytest

pytest.importorskip("matplotlib")

import plot_sort_trace
from random_sort import RunConfig, run
from random_sort.plotting import plot_run


@pytest.fixture
def logging_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(plot_sort_trace, "configure_logging", lambda: calls.append(True))
    return calls


def test_plot_run_creates_parent_dirs(tmp_path):
    result = run(RunConfig(size=12, seed=8), stream=io.StringIO())
    output = tmp_path / "nested" / "trace.png"

    path = plot_run(result, output)

    assert path == output
    assert output.exists()


def test_plot_run_handles_empty_result(tmp_path):
    result = run(RunConfig(size=0), stream=io.StringIO())
    output = tmp_path / "empty.png"
    plot_run(result, output)
    assert output.exists()


def test_plot_script_main(tmp_path, capsys, logging_calls):
    output = tmp_path / "script.png"
    assert plot_sort_trace.main(["--size", "9", "--seed", "2", "--output", str(output)]) == 0
    assert output.exists()
    assert "Comparisons: 81" in capsys.readouterr().out
    assert logging_calls == [True]


def test_plot_script_rejects_negative_size(tmp_path, logging_calls):
    output = tmp_path / "never.png"
    assert plot_sort_trace.main(["--size", "-3", "--output", str(output)]) == 1
    assert not output.exists()


def test_plot_run_draws_running_swap_total(tmp_path, monkeypatch):
    import random_sort.plotting as plotting

    closed = []
    monkeypatch.setattr(plotting.plt, "close", closed.append)

    result = run(RunConfig(size=8, seed=11), stream=io.StringIO())
    plot_run(result, tmp_path / "totals.png")

    fig = closed[0]
    ax_total = fig.axes[2]
    totals = [int(v) for v in ax_total.get_lines()[0].get_ydata()]

    expected = []
    running = 0
    for count in result.trace.swaps_per_pass:
        running += count
        expected.append(running)
    assert totals == expected
    assert totals[-1] == result.trace.swaps
