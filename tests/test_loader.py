# tests/test_loader.py
import json

import pytest

from querygroup.export import get_exporter
from querygroup.query.group import Group, GroupKind
from querygroup.query.loader import QueryDocumentError, from_dict, loads
from querygroup.query.modifiers import Boost, ConstantScore, Occur, Proximity
from querygroup.query.term import Term

ALBUMS = {
    "occur": "MUST",
    "label": "albums",
    "groups": [
        {
            "boost": 0.3,
            "label": "styx",
            "terms": [
                {"field": "title", "value": "Grand Illusion", "proximity": 1},
                {"field": "title", "value": "Paradise Theatre", "proximity": 1},
            ],
        }
    ],
}


def test_from_dict_builds_tree():
    root = from_dict(ALBUMS)
    assert root.occur is Occur.MUST
    assert root.label == "albums"
    styx = root.children[0]
    assert styx.parent is root
    assert styx.boost == Boost(0.3)
    assert styx.terms[0].proximity == Proximity(1)
    assert str(root) == '+( ( title:"Grand Illusion"~1 title:"Paradise Theatre"~1 )^0.3 )'


def test_defaults():
    root = from_dict({"terms": [{"value": "pink panther"}]})
    assert root.kind is GroupKind.STANDARD
    assert root.has_grouping_parenthesis
    assert root.occur is Occur.SHOULD
    assert root.terms[0].occur is Occur.SHOULD
    assert str(root) == '( "pink panther" )'


def test_model_guards_apply():
    root = from_dict(
        {
            "kind": "filter",
            "parenthesis": False,
            "occur": "MUST",
            "terms": [
                {"field": "years", "value": "[1900 TO 1963]", "proximity": 2, "constant_score": 2},
                {"field": "BirthYear", "value": "(1860 1861)", "boost": 2},
            ],
        }
    )
    assert root.kind is GroupKind.FILTER
    assert root.occur is Occur.SHOULD
    assert root.terms[0].proximity is None
    assert root.terms[0].constant_score == ConstantScore(2.0)
    assert root.terms[1].boost is None
    assert str(root) == "years:[1900 TO 1963]^=2 BirthYear:(1860 1861)"


def test_occur_is_case_insensitive_and_nullable():
    root = from_dict({"occur": "must_not", "terms": [{"value": "x", "occur": None}]})
    assert root.occur is Occur.MUST_NOT
    assert root.terms[0].occur is None


def test_numeric_value_is_text():
    root = from_dict({"terms": [{"field": "year", "value": 1953}]})
    assert root.terms[0] == Term("year", "1953")


def test_loads_matches_json_export():
    source = Group(label="root", occur=Occur.MUST)
    child = source.new_child().with_constant_score(1.5)
    child.add_term(Term("title", "pink panther").with_proximity(2))
    source.add_child(Group(GroupKind.FILTER)).add_term(Term("type", "film"))

    document = get_exporter("json").to_string(source)
    loaded = loads(document)

    assert loaded == source
    assert str(loaded) == str(source)
    assert loaded.children[1].kind is GroupKind.FILTER


@pytest.mark.parametrize(
    "document",
    [
        [],
        {"kind": "bogus"},
        {"kind": ["filter"]},
        {"occur": "ALWAYS"},
        {"terms": "title:x"},
        {"groups": [1]},
        {"terms": [{"value": "x", "boost": "high"}]},
        {"terms": [{"value": "x", "proximity": True}]},
        {"terms": [{"value": ["x"]}]},
        {"parenthesis": "false"},
        {"parenthesis": 0},
        {"terms": [{"value": "x", "proximity": 1.5}]},
    ],
)
def test_invalid_documents(document):
    with pytest.raises(QueryDocumentError):
        from_dict(document)


def test_error_message_has_path():
    with pytest.raises(QueryDocumentError, match=r"\$\.groups\[0\]\.terms\[1\]"):
        from_dict({"groups": [{"terms": [{"value": "a"}, {"value": "b", "occur": "nope"}]}]})


def test_invalid_json():
    with pytest.raises(QueryDocumentError, match="Invalid JSON"):
        loads("{not json")


def test_query_document_error_is_value_error():
    with pytest.raises(ValueError):
        loads(json.dumps({"kind": "bogus"}))


def test_whole_float_proximity_is_accepted():
    root = from_dict({"terms": [{"field": "color", "value": "grey", "proximity": 2.0}]})
    assert root.terms[0].proximity == Proximity(2)


def test_parenthesis_flag():
    root = from_dict({"parenthesis": False, "terms": [{"value": "x"}]})
    assert not root.has_grouping_parenthesis
    assert str(root) == "x"
