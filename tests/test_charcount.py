import io
from collections import Counter

from pocketkit.charcount import char_count, main


def _bytes_accounted(result):
    return sum(i * n for i, n in enumerate(result.utflen)) + result.invalid


def test_ascii():
    data = b"hello"
    result = char_count(data)
    assert result.counts == Counter("hello")
    assert result.utflen[1] == len(data)
    assert result.invalid == 0


def test_multibyte():
    text = "世界"
    result = char_count(text.encode("utf-8"))
    assert result.utflen[3] == len(text)
    assert result.counts == Counter(text)


def test_invalid_bytes():
    data = b"\xff\xfe"
    result = char_count(data)
    assert result.invalid == len(data)
    assert not result.counts


def test_every_byte_accounted_for():
    data = "a é 世 😀".encode("utf-8") + b"\xe4\xb8" + b"\x80z"
    result = char_count(data)
    assert _bytes_accounted(result) == len(data)
    assert sum(result.utflen) == sum(result.counts.values())


def test_encoded_replacement_char_is_valid():
    result = char_count("\ufffd".encode("utf-8"))
    assert result.counts["\ufffd"] == 1
    assert result.invalid == 0


def test_main_output(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"a\n\xff")))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("rune\tcount\n")
    assert "'a'\t1\n" in out
    assert "'\\n'\t1\n" in out
    assert "\nlen\tcount\n" in out
    assert out.endswith("\n1 invalid UTF-8 characters\n")