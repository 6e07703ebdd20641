import json

import pytest

from pocketkit.movie import MOVIES, Movie, marshal, titles


def test_marshal_compact_has_no_whitespace_between_tokens():
    text = marshal(MOVIES)
    assert "\n" not in text
    assert '":' in text and '": ' not in text
    assert text.startswith('[{"Title":"Casablanca","released":1942,')


def test_marshal_field_order_and_omitempty():
    decoded = json.loads(marshal(MOVIES))
    assert list(decoded[0]) == ["Title", "released", "Actors"]
    assert list(decoded[1]) == ["Title", "released", "color", "Actors"]
    assert decoded[1]["color"] is True


def test_marshal_indent_layout():
    lines = marshal(MOVIES, "    ").splitlines()
    assert lines[0] == "["
    assert lines[1] == "    {"
    assert lines[2] == '        "Title": "Casablanca",'
    assert lines[4] == '        "Actors": ['
    assert lines[-1] == "]"


def test_indent_and_compact_hold_the_same_data():
    assert json.loads(marshal(MOVIES, "    ")) == json.loads(marshal(MOVIES))


def test_titles_of_indented():
    assert titles(marshal(MOVIES, "    ")) == ["Casablanca", "Cool Hand Luke", "Bullitt"]


def test_titles_accepts_bytes_and_ignores_case():
    assert titles(b'[{"title": "A"}, {"Other": 1}]') == ["A", ""]


def test_html_characters_escaped_and_round_trip():
    text = marshal([Movie(title="<b>&</b>", year=1)])
    assert "<" not in text and "&" not in text
    assert "\\u003cb\\u003e\\u0026" in text
    assert titles(text) == ["<b>&</b>"]


def test_nil_actors_encode_as_null():
    assert json.loads(marshal([Movie("X", 2000)]))[0]["Actors"] is None


def test_titles_rejects_non_array():
    with pytest.raises(ValueError):
        titles('{"Title": "x"}')


def test_titles_rejects_invalid_json():
    with pytest.raises(ValueError):
        titles("[{")