# querygroup/query/modifiers.py
"""Value types that decorate terms and groups: occur, boost, constant score, proximity."""

from dataclasses import dataclass
from enum import Enum


def format_number(value: float) -> str:
    """Format a modifier number with 4 decimals, dropping trailing zeros and point.

    Example:
        >>> format_number(0.3)
        '0.3'
        >>> format_number(10.0)
        '10'
    """
    text = f"{value:.4f}".rstrip("0")
    return text.rstrip(".")


class Occur(Enum):
    """Whether a clause must, should or must not match."""

    MUST = "+"
    SHOULD = ""
    MUST_NOT = "-"

    @property
    def prefix(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Boost:
    """Relevance boost: title:"pink panther"^1.5"""

    value: float

    def __str__(self) -> str:
        return f"^{format_number(self.value)}"


@dataclass(frozen=True)
class ConstantScore:
    """Constant score override: year:[1950 TO 1960]^=2"""

    value: float

    def __str__(self) -> str:
        return f"^={format_number(self.value)}"


@dataclass(frozen=True)
class Proximity:
    """Fuzziness for a single word (color:grey~1) or slop for a phrase (title:"pink panther"~2)."""

    value: int

    def __str__(self) -> str:
        return f"~{self.value}"


def as_boost(value: "Boost | float | None") -> Boost | None:
    if value is None or isinstance(value, Boost):
        return value
    return Boost(float(value))


def as_constant_score(value: "ConstantScore | float | None") -> ConstantScore | None:
    if value is None or isinstance(value, ConstantScore):
        return value
    return ConstantScore(float(value))


def as_proximity(value: "Proximity | int | None") -> Proximity | None:
    if value is None or isinstance(value, Proximity):
        return value
    return Proximity(int(value))
