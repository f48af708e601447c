# querygroup/query/combinators.py
from collections.abc import Iterable
from typing import TypeVar

from querygroup.query.group import Group, GroupKind
from querygroup.query.modifiers import Occur
from querygroup.query.term import Term

Clause = Term | Group
C = TypeVar("C", Term, Group)


def _fill(group: Group, clauses: Iterable[Clause]) -> Group:
    for clause in clauses:
        if isinstance(clause, Term):
            group.add_term(clause)
        else:
            group.add_child(clause)
    return group


def _with_occur(clause: C, occur: Occur) -> C:
    clause.occur = occur
    return clause


# Factory functions (public API)
def term(field: str | None, value: str | None) -> Term:
    return Term(field, value)


def text(value: str) -> Term:
    """Term on the default field."""
    return Term(None, value)


def range_term(
    field: str | None,
    start: object | None = None,
    end: object | None = None,
    inclusive: bool = True,
) -> Term:
    """Range term such as ``year:[1950 TO 1960]``; open bounds render as ``*``."""
    low = "*" if start is None else str(start)
    high = "*" if end is None else str(end)
    opening, closing = ("[", "]") if inclusive else ("{", "}")
    return Term(field, f"{opening}{low} TO {high}{closing}")


def must(clause: C) -> C:
    return _with_occur(clause, Occur.MUST)


def should(clause: C) -> C:
    return _with_occur(clause, Occur.SHOULD)


def must_not(clause: C) -> C:
    return _with_occur(clause, Occur.MUST_NOT)


def any_of(*clauses: Clause) -> Group:
    return _fill(Group(), clauses)


def all_of(*clauses: Clause) -> Group:
    return _fill(Group(), (must(c) for c in clauses))


def none_of(*clauses: Clause) -> Group:
    return _fill(Group(), (must_not(c) for c in clauses))


def filter_of(*clauses: Clause) -> Group:
    return _fill(Group(GroupKind.FILTER), clauses)


def flat(*clauses: Clause) -> Group:
    """Group without its own parentheses; its clauses render inline in the parent."""
    return _fill(Group(grouping_parenthesis=False), clauses)
