"""Movies encoded as JSON."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from pocketkit.github import _field

_HTML_SAFE = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


@dataclass
class Movie:
    """A film, its release year, whether it is in colour, and its actors."""

    title: str = ""
    year: int = 0
    color: bool = False
    actors: list[str] | None = None


MOVIES = [
    Movie("Casablanca", 1942, False, ["Humphrey Bogart", "Ingrid Bergman"]),
    Movie("Cool Hand Luke", 1967, True, ["Paul Newman"]),
    Movie("Bullitt", 1968, True, ["Steve McQueen", "Jacqueline Bisset"]),
]


def _as_json(movie: Movie) -> dict[str, Any]:
    obj: dict[str, Any] = {"Title": movie.title, "released": movie.year}
    if movie.color:
        obj["color"] = True
    obj["Actors"] = None if movie.actors is None else list(movie.actors)
    return obj


def marshal(movies: Iterable[Movie], indent: str | None = None) -> str:
    """Encode movies as a JSON array, indented by indent if given.

    The year is written as "released" and "color" is left out when false;
    <, > and & are escaped so the text is safe inside HTML.
    """
    payload = [_as_json(m) for m in movies]
    if indent is None:
        text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    else:
        text = json.dumps(payload, ensure_ascii=False, indent=indent, separators=(",", ": "))
    return text.translate(_HTML_SAFE)


def titles(data: str | bytes) -> list[str]:
    """Decode a JSON array of objects and return their titles."""
    decoded = json.loads(data)
    if decoded is None:
        return []
    if not isinstance(decoded, list):
        raise ValueError(f"json: cannot unmarshal {type(decoded).__name__} into a list")
    result = []
    for item in decoded:
        if item is None:
            result.append("")
            continue
        if not isinstance(item, dict):
            raise ValueError(f"json: cannot unmarshal {type(item).__name__} into a movie")
        title = _field(item, "Title")
        if title is None:
            title = ""
        if not isinstance(title, str):
            raise ValueError("json: cannot unmarshal non-string into field Title")
        result.append(title)
    return result