# querygroup/query/group.py
"""Group: a composite of terms and child groups rendered as a boolean query."""

import logging
import weakref
from collections.abc import Iterator
from enum import Enum

from querygroup.query.modifiers import (
    Boost,
    ConstantScore,
    Occur,
    as_boost,
    as_constant_score,
)
from querygroup.query.term import Term, is_blank

logger = logging.getLogger(__name__)

CLOSE_TOKEN = ")"
OPEN_COMMENT = "/* "
CLOSE_COMMENT = " */"
DEFAULT_SEPARATOR = " "
NEWLINE_SEPARATOR = "\n"
PRETTY_INDENT = "\t"


class GroupKind(Enum):
    """Rendering variant of a group."""

    STANDARD = "group"
    FILTER = "filter"


_OPEN_TOKENS: dict[GroupKind, str] = {
    GroupKind.STANDARD: "(",
    GroupKind.FILTER: "filter(",
}


class Group:
    """An ordered collection of terms and child groups.

    Instead of concatenating strings, a query is built as a tree and rendered
    once. Membership is by identity: the same Term or Group instance is held
    at most once, while two equal but distinct instances are separate members.
    A child group belongs to exactly one parent; adding it elsewhere moves it.

    Example:
        >>> group = Group(occur=Occur.MUST)
        >>> styx = group.new_child().with_boost(0.3)
        >>> styx.add_term(Term("title", "Grand Illusion").with_proximity(1))
        >>> str(group)
        '+( ( title:"Grand Illusion"~1 )^0.3 )'
    """

    def __init__(
        self,
        kind: GroupKind = GroupKind.STANDARD,
        *,
        label: str | None = None,
        occur: Occur | None = Occur.SHOULD,
        boost: Boost | float | None = None,
        constant_score: ConstantScore | float | None = None,
        grouping_parenthesis: bool = True,
    ) -> None:
        self._kind = kind
        self._terms: list[Term] = []
        self._groups: list[Group] = []
        self._parent: weakref.ref[Group] | None = None
        self._occur: Occur | None = Occur.SHOULD
        self._boost: Boost | None = None
        self._constant_score: ConstantScore | None = None
        self._has_grouping_parenthesis = True
        self.label = label

        self.has_grouping_parenthesis = grouping_parenthesis
        self.occur = occur
        if boost is not None:
            self.boost = boost
        if constant_score is not None:
            self.constant_score = constant_score

    # -- structure ---------------------------------------------------------

    @property
    def kind(self) -> GroupKind:
        return self._kind

    @property
    def is_filter(self) -> bool:
        return self._kind is GroupKind.FILTER

    @property
    def terms(self) -> tuple[Term, ...]:
        return tuple(self._terms)

    @property
    def children(self) -> tuple["Group", ...]:
        return tuple(self._groups)

    @property
    def parent(self) -> "Group | None":
        if self._parent is None:
            return None
        return self._parent()

    def _set_parent(self, parent: "Group | None") -> None:
        self._parent = weakref.ref(parent) if parent is not None else None

    @property
    def root(self) -> "Group":
        """Top-most group reached by walking parent links."""
        group = self
        while (parent := group.parent) is not None:
            group = parent
        return group

    def _contains_term(self, term: Term) -> bool:
        return any(t is term for t in self._terms)

    def _contains_group(self, group: "Group") -> bool:
        return any(g is group for g in self._groups)

    def _index_of_group(self, group: "Group") -> int:
        for index, g in enumerate(self._groups):
            if g is group:
                return index
        return -1

    def _detach(self, group: "Group") -> None:
        self._groups = [g for g in self._groups if g is not group]
        group._set_parent(None)

    def _ancestors(self) -> Iterator["Group"]:
        parent = self.parent
        while parent is not None:
            yield parent
            parent = parent.parent

    def _is_self_or_ancestor(self, group: "Group") -> bool:
        return group is self or any(a is group for a in self._ancestors())

    # -- terms -------------------------------------------------------------

    def add_term(self, term: Term | None) -> None:
        if term is None or self._contains_term(term):
            return
        self._terms.append(term)

    def remove_term(self, term: Term | None) -> None:
        if term is None:
            return
        self._terms = [t for t in self._terms if t is not term]

    # -- child groups ------------------------------------------------------

    def new_child(self) -> "Group":
        """Create an empty child group of the same kind and return it."""
        group = Group(self._kind)
        group._set_parent(self)
        self._groups.append(group)
        return group

    def add_child(self, group: "Group | None") -> "Group | None":
        """Append a child group and return it.

        A group that already has another parent is moved here. Adding None, a
        current child, the group itself or one of its ancestors does nothing.
        """
        if group is None or self._contains_group(group) or self._is_self_or_ancestor(group):
            return group

        previous = group.parent
        if previous is not None:
            logger.debug("Moving group %r to a new parent", group.label)
            previous._detach(group)

        group._set_parent(self)
        self._groups.append(group)
        return group

    def remove_child(self, group: "Group | None", splice: bool = False) -> None:
        """Detach a child group.

        With ``splice`` the removed group's own groups and then its terms are
        appended to this group, promoting them one level.
        """
        if group is None or group.parent is not self:
            return

        self._detach(group)

        if splice:
            sub_groups = list(group._groups)
            sub_terms = list(group._terms)
            logger.debug(
                "Splicing %s groups and %s terms into parent", len(sub_groups), len(sub_terms)
            )
            for sub_group in sub_groups:
                self.add_child(sub_group)
            for sub_term in sub_terms:
                self.add_term(sub_term)

    def wrap_with(self, wrapper: "Group | None") -> None:
        """Make ``wrapper`` the parent of this group, in this group's former position.

        Parents are held by weak reference, so the caller must keep a reference
        to ``wrapper`` when this group was a root.
        """
        if wrapper is None or self._is_self_or_ancestor(wrapper):
            return

        if (wrapper_parent := wrapper.parent) is not None:
            wrapper_parent._detach(wrapper)

        parent = self.parent
        if parent is None:
            wrapper.add_child(self)
            return

        index = parent._index_of_group(self)
        parent._detach(self)
        wrapper.add_child(self)

        logger.debug("Wrapping group at position %s", index)
        wrapper._set_parent(parent)
        parent._groups.insert(index, wrapper)

    # -- modifiers ---------------------------------------------------------

    @property
    def occur(self) -> Occur | None:
        return self._occur

    @occur.setter
    def occur(self, occur: Occur | None) -> None:
        # Without parentheses there is nowhere to put a +/- prefix.
        if occur is Occur.SHOULD or self._has_grouping_parenthesis:
            self._occur = occur

    def set_outer_occur(self, occur: Occur | None) -> None:
        """Set occur on the nearest ancestor that renders parentheses."""
        parent = self.parent
        if parent is None:
            return
        if parent.has_grouping_parenthesis:
            parent.occur = occur
        else:
            parent.set_outer_occur(occur)

    @property
    def boost(self) -> Boost | None:
        return self._boost

    @boost.setter
    def boost(self, boost: Boost | float | None) -> None:
        self._boost = as_boost(boost)
        if self._boost is not None:
            self._constant_score = None

    @property
    def constant_score(self) -> ConstantScore | None:
        return self._constant_score

    @constant_score.setter
    def constant_score(self, constant_score: ConstantScore | float | None) -> None:
        self._constant_score = as_constant_score(constant_score)
        if self._constant_score is not None:
            self._boost = None

    @property
    def has_grouping_parenthesis(self) -> bool:
        return self._has_grouping_parenthesis

    @has_grouping_parenthesis.setter
    def has_grouping_parenthesis(self, value: bool) -> None:
        self._has_grouping_parenthesis = value
        if not value:
            self._occur = Occur.SHOULD

    def with_occur(self, occur: Occur | None) -> "Group":
        self.occur = occur
        return self

    def with_boost(self, boost: Boost | float | None) -> "Group":
        self.boost = boost
        return self

    def with_constant_score(self, constant_score: ConstantScore | float | None) -> "Group":
        self.constant_score = constant_score
        return self

    def with_grouping_parenthesis(self, value: bool) -> "Group":
        self.has_grouping_parenthesis = value
        return self

    def with_label(self, label: str | None) -> "Group":
        self.label = label
        return self

    # -- labels ------------------------------------------------------------

    def has_label(self, label: str | None) -> bool:
        if not label:
            return False
        return self.label == label

    def find_by_label(self, label: str | None) -> list["Group"]:
        """All groups in this subtree with the given label, in pre-order."""
        found: list[Group] = []
        self._collect_by_label(label, found)
        return found

    def _collect_by_label(self, label: str | None, found: list["Group"]) -> None:
        if self.has_label(label):
            found.append(self)
        for group in self._groups:
            group._collect_by_label(label, found)

    # -- state -------------------------------------------------------------

    def is_empty(self) -> bool:
        return all(t.is_blank() for t in self._terms) and all(
            g.is_empty() for g in self._groups
        )

    def is_valid(self) -> bool:
        return not self.is_empty()

    def copy(self) -> "Group":
        """Deep copy of this subtree. The copy has no parent."""
        other = Group(self._kind)
        other.label = self.label
        other._has_grouping_parenthesis = self._has_grouping_parenthesis
        other._occur = self._occur
        other._boost = self._boost
        other._constant_score = self._constant_score
        other._terms = [t.copy() for t in self._terms]
        for group in self._groups:
            other.add_child(group.copy())
        return other

    # -- rendering ---------------------------------------------------------

    def render(
        self,
        include_labels: bool = False,
        indentation: str = "",
        indent_unit: str = "",
        separator: str = DEFAULT_SEPARATOR,
    ) -> str:
        """Render the subtree as query text.

        Args:
            include_labels: Emit ``/* label */`` lines before labelled groups.
            indentation: Indentation of this group's opening line.
            indent_unit: Added to the indentation for nested content.
            separator: Placed between clauses.

        Returns:
            The query text, or an empty string for an empty group.
        """
        if self.is_empty():
            return ""

        outer_indentation = indentation
        text = ""

        if include_labels and not is_blank(self.label):
            text += f"{indentation}{OPEN_COMMENT}{self.label}{CLOSE_COMMENT}{separator}"

        if self._has_grouping_parenthesis:
            text += indentation
            if self._occur is not None:
                text += self._occur.prefix
            text += _OPEN_TOKENS[self._kind]
            indentation += indent_unit

        for term in self._terms:
            rendered = term.render()
            if is_blank(rendered):
                continue
            if text:
                text += separator
            text += indentation + rendered

        for group in self._groups:
            rendered = group.render(include_labels, indentation, indent_unit, separator)
            if is_blank(rendered):
                continue
            if text:
                text += separator
            text += rendered

        if self._has_grouping_parenthesis:
            text += separator + outer_indentation + CLOSE_TOKEN
            if self._constant_score is not None:
                text += str(self._constant_score)
            elif self._boost is not None:
                text += str(self._boost)

        return text

    def pretty(self, include_labels: bool = False, indent_unit: str = PRETTY_INDENT) -> str:
        """Indented rendering, one clause per line."""
        return self.render(include_labels, "", indent_unit, NEWLINE_SEPARATOR)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Group(kind={self._kind.name}, label={self.label!r}, "
            f"terms={len(self._terms)}, groups={len(self._groups)})"
        )

    def _key(self) -> tuple:
        # The parent is left out: equal subtrees may hang under different parents.
        return (
            tuple(self._terms),
            self.label,
            tuple(self._groups),
            self._occur,
            self._constant_score,
            self._boost,
            self._has_grouping_parenthesis,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())
