import pytest

from consolekit.grading import grade, grade_for_average, main


@pytest.mark.parametrize(
    "average,expected",
    [
        (100, "A1"),
        (91, "A1"),
        (90.9, "A2"),
        (81, "A2"),
        (80.5, "B1"),
        (71, "B1"),
        (61, "B2"),
        (51, "C1"),
        (41, "C2"),
        (33, "D"),
        (32.9, "E1"),
        (21, "E1"),
        (20.9, "E2"),
        (0, "E2"),
    ],
)
def test_band_boundaries(average, expected):
    assert grade_for_average(average) == expected


@pytest.mark.parametrize("average", [100.01, -0.5, float("nan"), 1000])
def test_out_of_range_average_raises(average):
    with pytest.raises(ValueError):
        grade_for_average(average)


def test_grade_uses_average():
    assert grade([100, 100, 80, 80, 95]) == grade_for_average((100 + 100 + 80 + 80 + 95) / 5)


def test_grade_of_uniform_marks_matches_single_mark():
    for mark in (0, 25, 45, 70, 99):
        assert grade([mark] * 5) == grade_for_average(mark)


def test_grade_empty_raises():
    with pytest.raises(ValueError):
        grade([])


def test_grade_invalid_average_raises():
    with pytest.raises(ValueError):
        grade([150, 150, 150, 150, 150])


def test_main_with_arguments(capsys):
    assert main(["100", "100", "100", "100", "100"]) == 0
    assert "Grade = A1" in capsys.readouterr().out


def test_main_reads_marks_across_lines(monkeypatch, capsys):
    lines = iter(["10 10", "10", "10 10"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    assert main([]) == 0
    assert "Grade = E2" in capsys.readouterr().out


def test_main_reports_invalid(capsys):
    assert main(["200", "200", "200", "200", "200"]) == 0
    assert "Grade = Invalid!" in capsys.readouterr().out