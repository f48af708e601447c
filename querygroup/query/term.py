# querygroup/query/term.py
"""Term: the leaf unit of a query (field, value and modifiers)."""

from querygroup.query.modifiers import (
    Boost,
    ConstantScore,
    Occur,
    Proximity,
    as_boost,
    as_constant_score,
    as_proximity,
)


def is_blank(text: str | None) -> bool:
    return text is None or not text.strip()


class Term:
    """A single query clause such as ``+title:"pink panther"~1^1.5``.

    Values with more than one token are wrapped in double quotes unless they
    are already quoted, a range (``[``/``{``) or a grouping clause (``(``).
    Range values never carry a proximity; grouping clauses never carry a
    proximity or a boost. Boost and constant score exclude each other: the
    one set last wins.

    Example:
        >>> str(Term("title", "pink panther").with_boost(1.5))
        'title:"pink panther"^1.5'
    """

    def __init__(self, field: str | None = None, value: str | None = None) -> None:
        self._field: str | None = None
        self._value: str | None = None
        self._boost: Boost | None = None
        self._constant_score: ConstantScore | None = None
        self._proximity: Proximity | None = None
        self._occur: Occur | None = Occur.SHOULD
        self._is_range = False
        self._is_grouping_clause = False
        self.field = field
        self.value = value

    @property
    def field(self) -> str | None:
        return self._field

    @field.setter
    def field(self, field: str | None) -> None:
        self._field = field

    @property
    def value(self) -> str | None:
        return self._value

    @value.setter
    def value(self, value: str | None) -> None:
        self._is_range = False
        self._is_grouping_clause = False
        if not is_blank(value):
            self._is_range = value.startswith(("[", "{"))
            self._is_grouping_clause = value.startswith("(")

            if (
                len(value.split()) > 1
                and not value.startswith('"')
                and not self._is_range
                and not self._is_grouping_clause
            ):
                value = f'"{value}"'

            if self._is_range:
                self._proximity = None
            if self._is_grouping_clause:
                self._proximity = None
                self._boost = None
        self._value = value

    @property
    def is_range(self) -> bool:
        return self._is_range

    @property
    def is_grouping_clause(self) -> bool:
        return self._is_grouping_clause

    @property
    def boost(self) -> Boost | None:
        return self._boost

    @boost.setter
    def boost(self, boost: Boost | float | None) -> None:
        if self._is_grouping_clause:
            return
        boost = as_boost(boost)
        if boost is not None:
            self._constant_score = None
        self._boost = boost

    @property
    def constant_score(self) -> ConstantScore | None:
        return self._constant_score

    @constant_score.setter
    def constant_score(self, constant_score: ConstantScore | float | None) -> None:
        constant_score = as_constant_score(constant_score)
        if constant_score is not None:
            self._boost = None
        self._constant_score = constant_score

    @property
    def proximity(self) -> Proximity | None:
        return self._proximity

    @proximity.setter
    def proximity(self, proximity: Proximity | int | None) -> None:
        if self._is_range or self._is_grouping_clause:
            return
        self._proximity = as_proximity(proximity)

    @property
    def occur(self) -> Occur | None:
        return self._occur

    @occur.setter
    def occur(self, occur: Occur | None) -> None:
        self._occur = occur

    def with_occur(self, occur: Occur | None) -> "Term":
        self.occur = occur
        return self

    def with_boost(self, boost: Boost | float | None) -> "Term":
        self.boost = boost
        return self

    def with_constant_score(self, constant_score: ConstantScore | float | None) -> "Term":
        self.constant_score = constant_score
        return self

    def with_proximity(self, proximity: Proximity | int | None) -> "Term":
        self.proximity = proximity
        return self

    def is_blank(self) -> bool:
        """True when both field and value are empty."""
        return is_blank(self._value) and is_blank(self._field)

    def copy(self) -> "Term":
        """Copy every attribute, including the derived range/grouping flags."""
        other = Term()
        other._field = self._field
        other._value = self._value
        other._boost = self._boost
        other._constant_score = self._constant_score
        other._proximity = self._proximity
        other._occur = self._occur
        other._is_range = self._is_range
        other._is_grouping_clause = self._is_grouping_clause
        return other

    def render(self) -> str:
        if is_blank(self._value):
            return ""

        parts: list[str] = []
        if self._occur is not None:
            parts.append(self._occur.prefix)
        if not is_blank(self._field):
            parts.append(f"{self._field}:")
        parts.append(self._value)
        if self._proximity is not None:
            parts.append(str(self._proximity))
        if self._boost is not None:
            parts.append(str(self._boost))
        elif self._constant_score is not None:
            parts.append(str(self._constant_score))
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Term(field={self._field!r}, value={self._value!r})"

    def _key(self) -> tuple:
        return (
            self._field,
            self._value,
            self._boost,
            self._constant_score,
            self._proximity,
            self._occur,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())
