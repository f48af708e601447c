# querygroup/query/loader.py
"""Build a query tree from a JSON document."""

import json
import logging
from typing import Any, TypeVar

from querygroup.query.group import Group, GroupKind
from querygroup.query.modifiers import Occur
from querygroup.query.term import Term

logger = logging.getLogger(__name__)

N = TypeVar("N", int, float)

_KINDS: dict[str, GroupKind] = {kind.value: kind for kind in GroupKind}


class QueryDocumentError(ValueError):
    """Raised when a tree document cannot be turned into a query tree."""


def _parse_occur(raw: Any, path: str) -> Occur | None:
    if raw is None:
        return None
    if isinstance(raw, str) and raw.upper() in Occur.__members__:
        return Occur[raw.upper()]
    raise QueryDocumentError(
        f"{path}: unknown occur {raw!r}, expected one of {list(Occur.__members__)}"
    )


def _parse_number(
    data: dict[str, Any], key: str, path: str, kind: type[N]
) -> N | None:
    raw = data.get(key)
    if raw is None:
        return None
    if isinstance(raw, bool) or not isinstance(raw, int | float):
        raise QueryDocumentError(f"{path}.{key}: expected a number, got {raw!r}")
    if kind is int and not float(raw).is_integer():
        raise QueryDocumentError(f"{path}.{key}: expected an integer, got {raw!r}")
    return kind(raw)


def _parse_bool(data: dict[str, Any], key: str, path: str, default: bool) -> bool:
    raw = data.get(key, default)
    if not isinstance(raw, bool):
        raise QueryDocumentError(f"{path}.{key}: expected true or false, got {raw!r}")
    return raw


def _parse_text(data: dict[str, Any], key: str, path: str) -> str | None:
    raw = data.get(key)
    if raw is None or isinstance(raw, str):
        return raw
    if isinstance(raw, int | float) and not isinstance(raw, bool):
        return str(raw)
    raise QueryDocumentError(f"{path}.{key}: expected a string, got {raw!r}")


def _parse_list(data: dict[str, Any], key: str, path: str) -> list[Any]:
    items = data.get(key, [])
    if not isinstance(items, list):
        raise QueryDocumentError(f"{path}.{key}: expected a list")
    return items


def _parse_term(data: Any, path: str) -> Term:
    if not isinstance(data, dict):
        raise QueryDocumentError(f"{path}: expected an object")

    term = Term(_parse_text(data, "field", path), _parse_text(data, "value", path))
    if "occur" in data:
        term.occur = _parse_occur(data["occur"], path)
    if (proximity := _parse_number(data, "proximity", path, int)) is not None:
        term.proximity = proximity
    if (boost := _parse_number(data, "boost", path, float)) is not None:
        term.boost = boost
    if (constant_score := _parse_number(data, "constant_score", path, float)) is not None:
        term.constant_score = constant_score
    return term


def _parse_group(data: Any, path: str) -> Group:
    if not isinstance(data, dict):
        raise QueryDocumentError(f"{path}: expected an object")

    kind_name = data.get("kind", GroupKind.STANDARD.value)
    if not isinstance(kind_name, str) or kind_name not in _KINDS:
        raise QueryDocumentError(
            f"{path}: unknown kind {kind_name!r}, expected one of {list(_KINDS)}"
        )

    group = Group(
        _KINDS[kind_name],
        label=_parse_text(data, "label", path),
        grouping_parenthesis=_parse_bool(data, "parenthesis", path, True),
    )
    if "occur" in data:
        group.occur = _parse_occur(data["occur"], path)
    if (boost := _parse_number(data, "boost", path, float)) is not None:
        group.boost = boost
    if (constant_score := _parse_number(data, "constant_score", path, float)) is not None:
        group.constant_score = constant_score

    for i, item in enumerate(_parse_list(data, "terms", path)):
        group.add_term(_parse_term(item, f"{path}.terms[{i}]"))
    for i, item in enumerate(_parse_list(data, "groups", path)):
        group.add_child(_parse_group(item, f"{path}.groups[{i}]"))
    return group


def from_dict(data: dict[str, Any]) -> Group:
    """Build a group tree from a decoded document.

    Args:
        data: Mapping in the shape produced by the JSON exporter.

    Returns:
        The root group.

    Raises:
        QueryDocumentError: If a node is malformed.
    """
    root = _parse_group(data, "$")
    logger.debug("Loaded query tree with %s top-level groups", len(root.children))
    return root


def loads(document: str) -> Group:
    try:
        data = json.loads(document)
    except json.JSONDecodeError as e:
        raise QueryDocumentError(f"Invalid JSON: {e}") from e
    return from_dict(data)
