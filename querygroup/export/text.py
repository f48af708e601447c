# querygroup/export/text.py
from querygroup.query.group import PRETTY_INDENT, Group

from .base import Exporter


class QueryExporter(Exporter):
    """Compact single-line query text."""

    def to_string(self, group: Group) -> str:
        return group.render()


class PrettyExporter(Exporter):
    """Indented query text, one clause per line."""

    def __init__(self, indent: str = PRETTY_INDENT, include_labels: bool = False):
        self.indent = indent
        self.include_labels = include_labels

    def to_string(self, group: Group) -> str:
        return group.pretty(self.include_labels, self.indent)
