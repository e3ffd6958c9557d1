from pathlib import Path

from flowshop_sa.evaluation import deadline_report, evaluate
from flowshop_sa.visualization import (
    format_deadline_table,
    format_summary,
    format_text_gantt,
    plot_convergence,
    plot_gantt,
)


def test_text_gantt_worked_example(small_jobs) -> None:
    result = evaluate(small_jobs, [1, 2, 3], [6, 6, 6])
    lines = format_text_gantt([1, 2, 3], result).split("\n\n")
    assert lines == [
        "1|1|1|2|2|3|3|3|3|",
        "-|-|-|1|1|2|2|2|-|3|",
    ]


def test_deadline_table(small_jobs) -> None:
    result = evaluate(small_jobs, [1, 2, 3], [6, 6, 6])
    table = format_deadline_table(deadline_report([1, 2, 3], result, [6, 6, 6]))
    lines = table.splitlines()
    assert lines[0].split() == ["Ji", "Ci", "di", "Li", "Ti"]
    assert lines[2].split() == ["J1", "5", "6", "-1", "0"]
    assert lines[4].split() == ["J3", "10", "6", "4", "4"]
    assert lines[-1].split() == ["SUM", "5", "6"]


def test_summary(small_jobs) -> None:
    result = evaluate(small_jobs, [1, 2, 3], [6, 6, 6])
    text = format_summary("Cmax", [3, 2, 1], [1, 2, 3], result)
    assert "Initial order: 3 2 1" in text
    assert "Best order: 1 2 3" in text
    assert "C-max: 10" in text
    assert "T-sum: 6" in text


def test_plot_gantt_writes_png(small_jobs, tmp_path: Path) -> None:
    result = evaluate(small_jobs, [2, 1, 3], [6, 6, 6])
    out = tmp_path / "charts" / "gantt.png"
    path = plot_gantt(small_jobs, [2, 1, 3], result, str(out))
    assert Path(path).exists()
    assert out.stat().st_size > 0


def test_plot_convergence_writes_png(tmp_path: Path) -> None:
    out = tmp_path / "conv.png"
    plot_convergence({"Cmax": [12, 11, 11, 10], "Tsum": [6, 4, 4, 3]}, str(out))
    assert out.exists()


def test_text_gantt_cells_aligned_for_two_digit_ids() -> None:
    jobs = [[1, 1] for _ in range(10)]
    order = list(range(1, 11))
    result = evaluate(jobs, order, [100] * 10)
    lines = format_text_gantt(order, result).split("\n\n")
    assert lines[0].startswith(" 1| 2|")
    assert lines[1].startswith(" -| 1|")
    assert lines[1].endswith("10|")
    for line in lines:
        cells = line.split("|")[:-1]
        assert all(len(c) == 2 for c in cells)
