# querygroup/export/__init__.py
from typing import Any

from .base import Exporter
from .json import JsonExporter
from .text import PrettyExporter, QueryExporter

EXPORTERS: dict[str, type[Exporter]] = {
    "query": QueryExporter,
    "pretty": PrettyExporter,
    "json": JsonExporter,
}


def get_exporter(name: str, **options: Any) -> Exporter:
    """Get an exporter by format name.

    Args:
        name: One of "query", "pretty", "json".
        **options: Passed to the exporter's constructor.

    Raises:
        ValueError: If the format is unknown.
    """
    exporter_cls = EXPORTERS.get(name.lower())
    if exporter_cls is None:
        raise ValueError(f"Unknown format: {name}. Available: {list(EXPORTERS.keys())}")
    return exporter_cls(**options)


__all__ = [
    "Exporter",
    "JsonExporter",
    "PrettyExporter",
    "QueryExporter",
    "EXPORTERS",
    "get_exporter",
]
