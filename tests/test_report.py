"""Tests for the console summary"""

from logbench.report import print_summary, summarize, summary_rows


def test_summarize():
    stats = summarize([100, 200, 150])
    assert stats["count"] == 3
    assert stats["avg"] == 150
    assert stats["median"] == 150
    assert stats["min"] == 100
    assert stats["max"] == 200
    assert stats["total"] == 450


def test_summarize_empty():
    assert summarize([]) == {"count": 0, "avg": 0, "median": 0, "min": 0, "max": 0, "total": 0}


def test_rows_relative_to_fastest():
    rows = summary_rows({"file": [1000, 1000], "rdbms": [4000, 4000], "empty": []})

    assert [row[0] for row in rows] == ["file", "rdbms", "empty"]
    assert rows[0][2] == "1.000"
    assert "1.0x" in rows[0][-1]
    assert "4.0x" in rows[1][-1]
    assert "0.0x" in rows[2][-1]


def test_print_summary(capsys):
    print_summary({"sqlite": [2000, 3000]})
    out = capsys.readouterr().out
    assert "sqlite" in out
    assert "2.500" in out


def test_summary_keeps_three_decimals(capsys):
    print_summary({"file": [1000, 1000], "rdbms": [3000, 3000]})
    out = capsys.readouterr().out
    assert "1.000" in out
    assert "3.000" in out
