"""Print issue search results as a table, an HTML page or a report."""

from __future__ import annotations

import argparse
import sys
from datetime import datetime, timezone

import jinja2

from pocketkit.github import IssuesSearchResult, search_issues

_HTML_TEMPLATE = """
<h1>{{ total_count }} issues</h1>
<table>
<tr style='text-align: left'>
  <th>#</th>
  <th>State</th>
  <th>User</th>
  <th>Title</th>
</tr>
{% for item in items %}
<tr>
  <td><a href='{{ item.html_url }}'>{{ item.number }}</a></td>
  <td>{{ item.state }}</td>
  <td><a href='{{ item.user.html_url }}'>{{ item.user.login }}</a></td>
  <td><a href='{{ item.html_url }}'>{{ item.title }}</a></td>
</tr>
{% endfor %}
</table>
"""

_REPORT_TEMPLATE = """{{ total_count }} issues:
{% for item in items %}----------------------------------------
Number: {{ item.number }}
User:   {{ item.user.login }}
Title:  {{ item.title[:64] }}
Age:    {{ days_ago(item.created_at) }} days
{% endfor %}"""

_ISSUE_LIST = jinja2.Environment(autoescape=True, keep_trailing_newline=True).from_string(
    _HTML_TEMPLATE
)
_REPORT = jinja2.Environment(autoescape=False, keep_trailing_newline=True).from_string(
    _REPORT_TEMPLATE
)


def days_ago(t: datetime, now: datetime | None = None) -> int:
    """Whole days elapsed from t until now."""
    current = datetime.now(timezone.utc) if now is None else now
    return int((current - t).total_seconds() / 3600 / 24)


def format_table(result: IssuesSearchResult) -> str:
    """One line per issue: number, user login and title, truncated."""
    lines = [f"{result.total_count} issues:"]
    for item in result.items:
        login = item.user.login if item.user is not None else ""
        lines.append(f"#{item.number:<5d} {login:>9.9} {item.title[:55]}")
    return "".join(line + "\n" for line in lines)


def render_html(result: IssuesSearchResult) -> str:
    """Render the issues as an HTML table, escaping their text."""
    return _ISSUE_LIST.render(total_count=result.total_count, items=result.items)


def render_report(result: IssuesSearchResult, now: datetime | None = None) -> str:
    """Render a plain-text report with each issue's age in days."""
    current = datetime.now(timezone.utc) if now is None else now
    return _REPORT.render(
        total_count=result.total_count,
        items=result.items,
        days_ago=lambda t: days_ago(t, current),
    )


def main(argv: list[str] | None = None) -> int:
    """Search for issues matching the terms and print them."""
    parser = argparse.ArgumentParser(prog="issues", description="Search issues.")
    style = parser.add_mutually_exclusive_group()
    style.add_argument("--html", action="store_true", help="print an HTML table")
    style.add_argument("--report", action="store_true", help="print a report")
    parser.add_argument("terms", nargs="*")
    ns = parser.parse_args(sys.argv[1:] if argv is None else argv)
    try:
        result = search_issues(ns.terms)
    except (OSError, ValueError) as err:
        print(err, file=sys.stderr)
        return 1
    if ns.html:
        sys.stdout.write(render_html(result))
    elif ns.report:
        sys.stdout.write(render_report(result))
    else:
        sys.stdout.write(format_table(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())