# querygroup/export/base.py
"""Base class for query tree exporters."""

from abc import ABC, abstractmethod
from pathlib import Path

from querygroup.query.group import Group


class Exporter(ABC):
    """Base class for query tree exporters."""

    @abstractmethod
    def to_string(self, group: Group) -> str:
        """Serialize the tree rooted at ``group``."""
        ...

    def export(self, group: Group, path: Path) -> None:
        path.write_text(self.to_string(group), encoding="utf-8")
