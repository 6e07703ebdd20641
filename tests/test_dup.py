import io

import pytest

from pocketkit.dup import count_by_file, count_lines, main, split_count


@pytest.fixture
def two_files(tmp_path):
    first = tmp_path / "first.txt"
    second = tmp_path / "second.txt"
    first.write_text("alpha\nbeta\nalpha\n")
    second.write_text("beta\r\ngamma")
    return str(first), str(second)


def test_count_lines_strips_terminators():
    counts = count_lines(["x\n", "y\r\n", "x", "y"])
    assert counts == {"x": 2, "y": 2}


def test_count_lines_total_matches_input_length():
    lines = ["a", "b", "a", "c", "a"]
    counts = count_lines(lines)
    assert sum(counts.values()) == len(lines)
    assert counts["a"] == 3


def test_count_by_file_tracks_files(two_files):
    first, second = two_files
    counts, files, errors = count_by_file([first, second])
    assert errors == []
    assert counts["alpha"] == 2
    assert counts["beta"] == 2
    assert counts["gamma"] == 1
    assert files["alpha"] == [first]
    assert files["beta"] == [first, second]


def test_count_by_file_reports_missing_file(two_files, tmp_path):
    first, _ = two_files
    missing = str(tmp_path / "missing.txt")
    counts, files, errors = count_by_file([missing, first])
    assert len(errors) == 1
    assert isinstance(errors[0], FileNotFoundError)
    assert counts["alpha"] == 2


def test_split_count_keeps_trailing_empty_piece(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("a\nb\na\n")
    counts, errors = split_count([str(path)])
    assert errors == []
    assert counts["a"] == 2
    assert counts[""] == 1


def test_split_count_keeps_carriage_return(tmp_path):
    path = tmp_path / "data.txt"
    path.write_bytes(b"a\r\na\n")
    counts, _ = split_count([str(path)])
    assert counts["a\r"] == 1
    assert counts["a"] == 1


def test_main_files_prints_duplicates(two_files, capsys):
    first, second = two_files
    assert main([first, second]) == 0
    out = capsys.readouterr().out.splitlines()
    assert f"2\talpha\t\t{first}" in out
    assert f"2\tbeta\t\t{first},{second}" in out
    assert all("gamma" not in line for line in out)


def test_main_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("one\ntwo\none\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "2\tone\n"