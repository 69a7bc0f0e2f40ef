"""strftime formatting pipeline.

A format string flows through four stages:
    - parser: split the format into literal text and directives
    - resolver: derive every time component from the TimeSource
    - zone: render UTC offsets and zone names
    - renderer: expand each directive with its padding and case flags

Functions:
    strftime: Format a timestamp using a strftime pattern.
    render: Alias of strftime.
    parse: Tokenize a format string.
    resolve: Compute TimeComponents for a TimeSource.
    render_tokens: Render tokens against TimeComponents.

Examples:
    >>> from datetime import datetime
    >>> from rstrftime.format import strftime

    >>> strftime("%Y/%-m/%-d", datetime(2006, 1, 2))
    '2006/1/2'
"""

from __future__ import annotations

from rstrftime.format.parser import (
    Directive,
    DirectiveSpec,
    Flag,
    Literal,
    Token,
    parse,
)
from rstrftime.format.renderer import render_tokens
from rstrftime.format.resolver import TimeComponents, resolve
from rstrftime.format.strftime import render, strftime
from rstrftime.format.zone import abbrev, format_offset

__all__: list[str] = [
    # Entry points
    "strftime",
    "render",
    # Parser
    "Flag",
    "DirectiveSpec",
    "Literal",
    "Directive",
    "Token",
    "parse",
    # Resolver
    "TimeComponents",
    "resolve",
    # Zone
    "format_offset",
    "abbrev",
    # Renderer
    "render_tokens",
]
