"""Hand-written parser for flat CSS stylesheets.

Syntax example:
    .card { margin-block: 4px 8px; inset-inline-start: 0; }
    /* comments are ignored */
    #header { border-block-end: 1px solid #ccc !important }

Only flat ``selector { declarations }`` blocks are understood; at-rules and
nesting are not.
"""

from __future__ import annotations

import re
from typing import Any, Mapping

from legacy_logical.stylesheet.errors import ParseError
from legacy_logical.stylesheet.model import StyleRule, Stylesheet
from legacy_logical.stylesheet.names import to_camel_case

__all__ = ["parse_stylesheet", "load_stylesheet_json"]

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)

# Matches a complete rule: selector { declarations }
_RULE_RE = re.compile(
    r"""
    (?P<selector>[^{}]*)    # everything before the opening brace
    \{                       # opening brace
    (?P<body>[^{}]*)         # declarations
    \}                       # closing brace
    """,
    re.VERBOSE,
)

# Matches a single declaration: name: value; (the last semicolon is optional)
_DECL_RE = re.compile(
    r"""
    (?P<name>-{0,2}[a-zA-Z_][a-zA-Z0-9_-]*)  # property name
    \s*:\s*                                 # colon separator
    (?P<value>[^;]+?)                       # value (non-greedy)
    \s*(?:;|$)                              # semicolon or end of block
    """,
    re.VERBOSE,
)


def _blank_comments(source: str) -> str:
    """Replace comments with spaces, keeping newlines so line numbers hold."""
    return _COMMENT_RE.sub(lambda m: re.sub(r"[^\n]", " ", m.group(0)), source)


def _line_of(source: str, offset: int) -> int:
    return source.count("\n", 0, offset) + 1


def _check_gap(source: str, start: int, end: int) -> None:
    """Raise ParseError if anything but whitespace sits between two rules."""
    gap = source[start:end]
    if gap.strip():
        offset = start + len(gap) - len(gap.lstrip())
        raise ParseError("Unexpected text outside a rule block", line=_line_of(source, offset))


def _parse_declarations(body: str) -> dict[str, str]:
    """Parse the body of a rule block into a declaration dictionary."""
    declarations: dict[str, str] = {}
    for match in _DECL_RE.finditer(body.strip()):
        declarations[to_camel_case(match.group("name"))] = match.group("value").strip()
    return declarations


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse CSS source into a Stylesheet.

    Returns a Stylesheet containing all non-empty rules in source order.
    Raises ParseError when a rule has no selector or when text is left over
    outside any rule block (typically an unbalanced brace).
    """
    source = _blank_comments(source)
    rules: list[StyleRule] = []
    position = 0
    for match in _RULE_RE.finditer(source):
        selector = match.group("selector").strip()
        if not selector:
            raise ParseError("Rule without a selector", line=_line_of(source, match.start("body")))
        _check_gap(source, position, match.start())
        position = match.end()
        declarations = _parse_declarations(match.group("body"))
        if declarations:  # skip rules with no valid declarations
            rules.append(StyleRule(selector=selector, declarations=declarations))

    _check_gap(source, position, len(source))
    return Stylesheet(rules=rules)


def load_stylesheet_json(data: Any) -> Stylesheet:
    """Build a Stylesheet from a decoded JSON object of selector -> declarations.

    Declaration values are kept as they are, so JSON numbers stay numbers.
    """
    if not isinstance(data, Mapping):
        raise ParseError("Expected a JSON object mapping selectors to declarations")
    rules: list[StyleRule] = []
    for selector, declarations in data.items():
        if not isinstance(declarations, Mapping):
            raise ParseError(f"Declarations for {selector!r} must be a JSON object")
        rules.append(StyleRule(selector=selector, declarations=dict(declarations)))
    return Stylesheet(rules=rules)
