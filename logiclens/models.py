"""
ⒸAngelaMos | 2026
models.py
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


PRIMITIVE_FIELDS: tuple[str, ...] = (
    "if_",
    "else_if",
    "else_",
    "for_",
    "while_",
    "do_while",
    "switch",
    "ternary",
    "logical_and",
    "logical_or",
)


class Theme(str, Enum):
    """
    Report color themes
    """
    LIGHT = "light"
    DARK = "dark"


class CounterSet(BaseModel):
    """
    Per-construct counts for one unit of text
    Serializes to the camelCase names used in reports
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    if_: int = Field(default=0, alias="if")
    else_if: int = Field(default=0, alias="elseIf")
    else_: int = Field(default=0, alias="else")
    for_: int = Field(default=0, alias="for")
    while_: int = Field(default=0, alias="while")
    do_while: int = Field(default=0, alias="doWhile")
    switch: int = 0
    ternary: int = 0
    logical_and: int = Field(default=0, alias="logicalAnd")
    logical_or: int = Field(default=0, alias="logicalOr")
    total: int = 0
    complexity_score: float = Field(default=0.0, alias="complexityScore")

    @classmethod
    def wire_name(cls, field_name: str) -> str:
        """
        Report name of a counter field
        """
        return cls.model_fields[field_name].alias or field_name

    def primitives(self) -> dict[str, int]:
        """
        Primitive counters keyed by report name, in rule order
        """
        return {self.wire_name(name): getattr(self, name) for name in PRIMITIVE_FIELDS}

    def primitive_sum(self) -> int:
        return sum(getattr(self, name) for name in PRIMITIVE_FIELDS)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


@dataclass(frozen=True)
class UnitAnalysis:
    """
    Analysis result for a single unit of source text
    """
    identifier: str
    counters: CounterSet

    @property
    def complexity(self) -> float:
        return self.counters.complexity_score

    @property
    def rating(self) -> str:
        """
        Ranking badge for project listings
        """
        if self.complexity > 15:
            return "high"
        if self.complexity > 8:
            return "medium"
        return "low"

    def to_dict(self) -> dict:
        return {
            "unit": self.identifier,
            "complexity": self.complexity,
            "rating": self.rating,
            "stats": self.counters.to_dict(),
        }
