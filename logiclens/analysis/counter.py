"""
ⒸAngelaMos | 2026
analysis/counter.py
"""
from __future__ import annotations

import re
from dataclasses import dataclass

from logiclens.models import CounterSet


@dataclass(frozen=True)
class ConstructRule:
    """
    A named regex counted over sanitized text
    """
    field: str
    pattern: re.Pattern[str]

    def count(self, text: str) -> int:
        return sum(1 for _ in self.pattern.finditer(text))


# do counts every bare `do` token, not only do/while pairs
RULES: tuple[ConstructRule, ...] = (
    ConstructRule("if_", re.compile(r"\bif\s*\(")),
    ConstructRule("else_if", re.compile(r"\belse\s+if\s*\(")),
    ConstructRule("else_", re.compile(r"\belse\b")),
    ConstructRule("for_", re.compile(r"\bfor\s*\(")),
    ConstructRule("while_", re.compile(r"\bwhile\s*\(")),
    ConstructRule("do_while", re.compile(r"\bdo\b")),
    ConstructRule("switch", re.compile(r"\bswitch\s*\(")),
    ConstructRule("ternary", re.compile(r"\?")),
    ConstructRule("logical_and", re.compile(r"&&")),
    ConstructRule("logical_or", re.compile(r"\|\|")),
)

# Rules whose raw matches also include every `else if`
SUBTRACT_ELSE_IF = ("if_", "else_")


def count(text: str) -> CounterSet:
    """
    Count constructs in already sanitized text
    Score fields are left at zero
    """
    counts = {rule.field: rule.count(text) for rule in RULES}

    for field in SUBTRACT_ELSE_IF:
        counts[field] -= counts["else_if"]

    return CounterSet(**counts, total=sum(counts.values()))
