# querygroup/query/__init__.py
from .combinators import (
    Clause,
    all_of,
    any_of,
    filter_of,
    flat,
    must,
    must_not,
    none_of,
    range_term,
    should,
    term,
    text,
)
from .group import Group, GroupKind
from .loader import QueryDocumentError, from_dict, loads
from .modifiers import Boost, ConstantScore, Occur, Proximity, format_number
from .term import Term

__all__ = [
    "Occur",
    "Boost",
    "ConstantScore",
    "Proximity",
    "format_number",
    "Term",
    "Group",
    "GroupKind",
    "Clause",
    "term",
    "text",
    "range_term",
    "must",
    "should",
    "must_not",
    "any_of",
    "all_of",
    "none_of",
    "filter_of",
    "flat",
    "from_dict",
    "loads",
    "QueryDocumentError",
]
