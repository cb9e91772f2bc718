"""
ⒸAngelaMos | 2026
analysis/preprocessor.py
"""
from __future__ import annotations

from enum import Enum, auto


QUOTES = frozenset({'"', "'", "`"})
LINE_BREAKS = frozenset({"\n", "\r"})


class ScanState(Enum):
    """
    States of the sanitizing scanner
    """
    CODE = auto()
    LITERAL = auto()
    LINE_COMMENT = auto()
    BLOCK_COMMENT = auto()


def sanitize(text: str) -> str:
    """
    Strip literal bodies and comments so they cannot be counted as code

    Literals keep their delimiters with an empty body, comments are dropped.
    A closed block comment leaves a single space behind.
    Line breaks inside either are kept so line structure survives.
    Unterminated literals and block comments run to the end of the text.
    """
    out: list[str] = []
    state = ScanState.CODE
    quote = ""
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]

        if state is ScanState.CODE:
            if ch in QUOTES:
                out.append(ch)
                quote = ch
                state = ScanState.LITERAL
            elif ch == "/" and i + 1 < n and text[i + 1] == "/":
                state = ScanState.LINE_COMMENT
                i += 1
            elif ch == "/" and i + 1 < n and text[i + 1] == "*":
                state = ScanState.BLOCK_COMMENT
                i += 1
            else:
                out.append(ch)

        elif state is ScanState.LITERAL:
            if ch == "\\":
                if i + 1 < n and text[i + 1] in LINE_BREAKS:
                    out.append(text[i + 1])
                i += 1
            elif ch == quote:
                out.append(ch)
                state = ScanState.CODE
            elif ch in LINE_BREAKS:
                out.append(ch)

        elif state is ScanState.LINE_COMMENT:
            if ch in LINE_BREAKS:
                out.append(ch)
                state = ScanState.CODE

        elif ch == "*" and i + 1 < n and text[i + 1] == "/":
            # a closed block comment still separates tokens
            out.append(" ")
            state = ScanState.CODE
            i += 1
        elif ch in LINE_BREAKS:
            out.append(ch)

        i += 1

    return "".join(out)
