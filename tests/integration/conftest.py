# tests/integration/conftest.py
import json
from pathlib import Path

import pytest

ALBUMS_TREE = {
    "occur": "MUST",
    "label": "albums",
    "groups": [
        {
            "label": "styx",
            "boost": 0.3,
            "terms": [
                {"field": "title", "value": "Grand Illusion", "proximity": 1},
                {"field": "title", "value": "Paradise Theatre", "proximity": 1},
            ],
        },
        {
            "label": "styx",
            "kind": "filter",
            "terms": [{"field": "year", "value": "[1977 TO 1981]"}],
        },
    ],
}

ALBUMS_QUERY = (
    '+( ( title:"Grand Illusion"~1 title:"Paradise Theatre"~1 )^0.3'
    " filter( year:[1977 TO 1981] ) )"
)


@pytest.fixture
def albums_file(tmp_path: Path) -> Path:
    path = tmp_path / "albums.json"
    path.write_text(json.dumps(ALBUMS_TREE), encoding="utf-8")
    return path
