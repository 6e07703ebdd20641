import io

from pocketkit.dedup import dedup, main


def test_dedup_keeps_first_occurrences():
    assert list(dedup(["a", "b", "a", "c", "b"])) == ["a", "b", "c"]


def test_dedup_invariants():
    lines = ["x", "y", "x", "", "z", "", "y"]
    out = list(dedup(lines))
    assert len(out) == len(set(out))
    assert set(out) == set(lines)
    assert out == sorted(set(lines), key=lines.index)


def test_dedup_is_lazy():
    gen = dedup(iter(["a", "a", "b"]))
    assert next(gen) == "a"
    assert next(gen) == "b"


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("one\ntwo\r\none\ntwo\nthree"))
    assert main([]) == 0
    assert capsys.readouterr().out == "one\ntwo\nthree\n"