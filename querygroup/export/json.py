# querygroup/export/json.py
import json
from typing import Any

from querygroup.query.group import Group
from querygroup.query.term import Term

from .base import Exporter


def term_to_dict(term: Term) -> dict[str, Any]:
    return {
        "field": term.field,
        "value": term.value,
        "occur": term.occur.name if term.occur is not None else None,
        "boost": term.boost.value if term.boost is not None else None,
        "constant_score": term.constant_score.value if term.constant_score is not None else None,
        "proximity": term.proximity.value if term.proximity is not None else None,
    }


def group_to_dict(group: Group) -> dict[str, Any]:
    return {
        "kind": group.kind.value,
        "label": group.label,
        "occur": group.occur.name if group.occur is not None else None,
        "boost": group.boost.value if group.boost is not None else None,
        "constant_score": group.constant_score.value if group.constant_score is not None else None,
        "parenthesis": group.has_grouping_parenthesis,
        "terms": [term_to_dict(t) for t in group.terms],
        "groups": [group_to_dict(g) for g in group.children],
    }


class JsonExporter(Exporter):
    """Export the tree as a JSON document."""

    def __init__(self, indent: int = 2):
        self.indent = indent

    def to_string(self, group: Group) -> str:
        return json.dumps(group_to_dict(group), indent=self.indent, ensure_ascii=False)
