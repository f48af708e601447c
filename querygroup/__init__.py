# querygroup/__init__.py
"""querygroup - Build Lucene/Solr boolean query strings from a tree of terms and groups."""

from querygroup.export import get_exporter
from querygroup.query import (
    Boost,
    ConstantScore,
    Group,
    GroupKind,
    Occur,
    Proximity,
    QueryDocumentError,
    Term,
    all_of,
    any_of,
    filter_of,
    flat,
    from_dict,
    loads,
    must,
    must_not,
    none_of,
    range_term,
    should,
    term,
    text,
)

__all__ = [
    # Model
    "Occur",
    "Boost",
    "ConstantScore",
    "Proximity",
    "Term",
    "Group",
    "GroupKind",
    # Combinators
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
    # Documents
    "from_dict",
    "loads",
    "QueryDocumentError",
    "get_exporter",
]
