#!/usr/bin/env python3
"""Pre-processing filters for pasted patent office correspondence.

Registered as the ``init`` pipeline, in this order:

1. nl       - normalize line endings to LF
2. hw       - full-width to half-width (NFKC plus fix-ups)
3. clean    - drop control/format characters, tabs become spaces
4. rm_blank - remove blank and whitespace-only lines
5. squeeze  - collapse runs of spaces
6. trim     - strip each line
7. gap      - exactly one empty line after every line
8. lead     - exactly one leading newline

Every filter returns "" for empty or None input.
"""

import re
import unicodedata
from typing import Any

from ..pipeline import FilterRegistry

NEWLINE_PATTERN = re.compile(r"\r\n?")
MULTI_SPACE_PATTERN = re.compile(r" {2,}")
BLANK_CHARS_PATTERN = re.compile(r"[ \t\r\f\v\u3000]")

FULLWIDTH_START = 0xFF01  # ！
FULLWIDTH_END = 0xFF5E  # ～
FULLWIDTH_OFFSET = 0xFEE0
IDEOGRAPHIC_SPACE = "\u3000"

_DROPPED_CATEGORIES = frozenset({"Cc", "Cf", "Cs", "Co", "Cn"})


def nl(text: str | None, *args: Any) -> str:
    if not text:
        return ""
    return NEWLINE_PATTERN.sub("\n", text)


def hw(text: str | None, *args: Any) -> str:
    """Convert full-width ASCII and ideographic spaces to half-width.

    NFKC also folds some kana and compatibility characters; the explicit
    FF01-FF5E mapping afterwards only matters for code points NFKC leaves alone.
    """
    if not text:
        return ""
    text = unicodedata.normalize("NFKC", text)

    out = []
    for ch in text:
        code = ord(ch)
        if ch == IDEOGRAPHIC_SPACE:
            out.append(" ")
        elif FULLWIDTH_START <= code <= FULLWIDTH_END:
            out.append(chr(code - FULLWIDTH_OFFSET))
        else:
            out.append(ch)
    return "".join(out)


def clean(text: str | None, *args: Any) -> str:
    """Remove control and invisible characters, keeping line structure."""
    if not text:
        return ""
    out = []
    for ch in text:
        if ch == "\n":
            out.append(ch)
        elif ch in "\t\v\f":
            out.append(" ")
        elif unicodedata.category(ch) in _DROPPED_CATEGORIES:
            continue
        else:
            out.append(ch)
    return "".join(out)


def rm_blank(text: str | None, *args: Any) -> str:
    if not text:
        return ""
    return "\n".join(line for line in text.split("\n") if BLANK_CHARS_PATTERN.sub("", line))


def squeeze(text: str | None, *args: Any) -> str:
    if not text:
        return ""
    return MULTI_SPACE_PATTERN.sub(" ", text)


def trim(text: str | None, *args: Any) -> str:
    if not text:
        return ""
    return "\n".join(line.strip() for line in text.split("\n"))


def gap(text: str | None, *args: Any) -> str:
    """Follow every line with one empty line ("a\\nb" -> "a\\n\\nb\\n")."""
    if not text:
        return ""
    out = []
    for line in text.split("\n"):
        out.append(line)
        out.append("")
    return "\n".join(out)


def lead(text: str | None, *args: Any) -> str:
    if not text:
        return ""
    if text.startswith("\n"):
        return text
    return "\n" + text


INIT_FILTERS = (nl, hw, clean, rm_blank, squeeze, trim, gap, lead)


def install_init_filters(registry: FilterRegistry) -> None:
    """Plugin: register the ``init`` pipeline on ``registry``."""
    registry.register("init", [{"fn": fn, "name": fn.__name__} for fn in INIT_FILTERS])


__all__ = ["INIT_FILTERS", "clean", "gap", "hw", "install_init_filters", "lead", "nl", "rm_blank", "squeeze", "trim"]
