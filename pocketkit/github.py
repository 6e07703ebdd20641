"""Search the GitHub issue tracker."""

from __future__ import annotations

import json
import re
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

ISSUES_URL = "https://api.github.com/search/issues"

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_RFC3339 = re.compile(
    r"(\d{4}-\d{2}-\d{2})[Tt](\d{2}:\d{2}:\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})"
)


@dataclass
class User:
    """The account that opened an issue."""

    login: str = ""
    html_url: str = ""


@dataclass
class Issue:
    """One issue found by a search."""

    number: int = 0
    html_url: str = ""
    title: str = ""
    state: str = ""
    user: User | None = None
    created_at: datetime = _ZERO_TIME
    body: str = ""  # in Markdown format


@dataclass
class IssuesSearchResult:
    """The total number of matches and the issues on the first page."""

    total_count: int = 0
    items: list[Issue] = field(default_factory=list)


def _field(obj: dict, name: str) -> Any:
    """Look a key up exactly, then ignoring case; None when absent."""
    if name in obj:
        return obj[name]
    folded = name.casefold()
    for key, value in obj.items():
        if key.casefold() == folded:
            return value
    return None


def _str(value: Any, name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"json: cannot unmarshal {type(value).__name__} into field {name} of type string")
    return value


def _int(value: Any, name: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"json: cannot unmarshal {type(value).__name__} into field {name} of type int")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"json: cannot unmarshal number {value} into field {name} of type int")
    return int(value)


def _object(value: Any, name: str) -> dict | None:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ValueError(f"json: cannot unmarshal {type(value).__name__} into field {name}")
    return value


def _parse_time(text: str) -> datetime:
    match = _RFC3339.fullmatch(text)
    if match is None:
        raise ValueError(f"parsing time {text!r}: not in RFC 3339 form")
    date, clock, frac, zone = match.groups()
    micros = ((frac or "") + "000000")[:6]
    offset = "+00:00" if zone.upper() == "Z" else zone
    return datetime.fromisoformat(f"{date}T{clock}.{micros}{offset}")


def _parse_user(value: Any) -> User | None:
    obj = _object(value, "User")
    if obj is None:
        return None
    return User(
        login=_str(_field(obj, "Login"), "Login"),
        html_url=_str(_field(obj, "html_url"), "HTMLURL"),
    )


def _parse_issue(obj: dict) -> Issue:
    created = _field(obj, "created_at")
    return Issue(
        number=_int(_field(obj, "Number"), "Number"),
        html_url=_str(_field(obj, "html_url"), "HTMLURL"),
        title=_str(_field(obj, "Title"), "Title"),
        state=_str(_field(obj, "State"), "State"),
        user=_parse_user(_field(obj, "User")),
        created_at=_ZERO_TIME if created is None else _parse_time(_str(created, "CreatedAt")),
        body=_str(_field(obj, "Body"), "Body"),
    )


def _parse_result(data: Any) -> IssuesSearchResult:
    obj = _object(data, "IssuesSearchResult")
    if obj is None:
        return IssuesSearchResult()
    raw_items = _field(obj, "Items")
    if raw_items is None:
        raw_items = []
    if not isinstance(raw_items, list):
        raise ValueError("json: cannot unmarshal items into field Items of type list")
    items = [
        _parse_issue(item)
        for item in (_object(raw, "Items") for raw in raw_items)
        if item is not None
    ]
    return IssuesSearchResult(
        total_count=_int(_field(obj, "total_count"), "TotalCount"),
        items=items,
    )


def search_issues(terms: Iterable[str]) -> IssuesSearchResult:
    """Query the issue tracker with the given search terms.

    Raises OSError when the request fails or the status is not 200 OK,
    and ValueError when the response is not the expected JSON.
    """
    query = urllib.parse.quote_plus(" ".join(terms), safe="")
    url = ISSUES_URL + "?q=" + query
    try:
        resp = urllib.request.urlopen(url)
    except urllib.error.HTTPError as err:
        raise OSError(f"search query failed: {err.code} {err.reason}") from None
    with resp:
        if resp.status != 200:
            reason = getattr(resp, "reason", "") or ""
            raise OSError(f"search query failed: {resp.status} {reason}".rstrip())
        data = json.load(resp)
    return _parse_result(data)