# querygroup/cli.py
import logging
import os
import sys
from pathlib import Path
from typing import Annotated, NoReturn

import cyclopts

from querygroup.export import Exporter, get_exporter
from querygroup.query import Group, QueryDocumentError, loads
from querygroup.query.group import PRETTY_INDENT

logger = logging.getLogger(__name__)

app = cyclopts.App(
    name="querygroup",
    help="Render Lucene/Solr boolean queries from JSON query trees.",
)

INDENT_ENV_VAR = "QUERYGROUP_INDENT"


def _load_indent_from_env() -> str:
    """Indent unit for pretty output, overridable through the environment."""
    return os.environ.get(INDENT_ENV_VAR, PRETTY_INDENT)


def _fail(message: str) -> NoReturn:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def _read_document(path: Path | None) -> str:
    """Read a tree document from a file, or from stdin when no path is given."""
    if path is not None:
        if not path.exists():
            _fail(f"File not found: {path}")
        return path.read_text(encoding="utf-8")
    if sys.stdin.isatty():
        _fail("No query document provided. Pass a file path or pipe JSON.")
    return sys.stdin.read()


def _load_tree(path: Path | None) -> Group:
    document = _read_document(path)
    try:
        return loads(document)
    except QueryDocumentError as e:
        _fail(str(e))


@app.command(name="render")
def render(
    path: Annotated[
        Path | None,
        cyclopts.Parameter(help="JSON query tree (reads stdin when omitted)"),
    ] = None,
    format: Annotated[
        str,
        cyclopts.Parameter(name=["--format", "-f"], help="Output format: query, pretty, json"),
    ] = "query",
    labels: Annotated[
        bool,
        cyclopts.Parameter(name="--labels", help="Include group labels as comments (pretty)"),
    ] = False,
    indent: Annotated[
        str | None,
        cyclopts.Parameter(name=["--indent", "-i"], help="Indent unit for pretty output"),
    ] = None,
    output: Annotated[
        Path | None,
        cyclopts.Parameter(name=["--output", "-o"], help="Output file path"),
    ] = None,
) -> None:
    """Render a query tree document."""
    options: dict[str, object] = {}
    if format.lower() == "pretty":
        options = {
            "indent": indent if indent is not None else _load_indent_from_env(),
            "include_labels": labels,
        }

    try:
        exporter: Exporter = get_exporter(format, **options)
    except ValueError as e:
        _fail(str(e))

    tree = _load_tree(path)
    if tree.is_empty():
        logger.info("Query tree is empty, rendering nothing")

    if output:
        exporter.export(tree, output)
        print(f"Wrote {format} query to {output}")
    else:
        print(exporter.to_string(tree))


@app.command(name="find")
def find(
    label: Annotated[str, cyclopts.Parameter(help="Group label to look for")],
    path: Annotated[
        Path | None,
        cyclopts.Parameter(help="JSON query tree (reads stdin when omitted)"),
    ] = None,
    pretty: Annotated[
        bool,
        cyclopts.Parameter(name=["--pretty", "-p"], help="Indented output"),
    ] = False,
) -> None:
    """Render every group carrying LABEL."""
    tree = _load_tree(path)
    matches = tree.find_by_label(label)
    if not matches:
        _fail(f"No group labelled {label!r}")

    for i, group in enumerate(matches):
        if i > 0:
            print()  # Blank line between groups
        print(group.pretty(indent_unit=_load_indent_from_env()) if pretty else group.render())

    print(f"\nFound: {len(matches)} groups", file=sys.stderr)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
