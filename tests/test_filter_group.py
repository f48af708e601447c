# tests/test_filter_group.py
from querygroup.query.group import Group, GroupKind
from querygroup.query.modifiers import ConstantScore, Occur, Proximity
from querygroup.query.term import Term


def test_filter_group_to_string():
    group = Group(GroupKind.FILTER)
    assert group.is_filter
    assert group.is_empty()
    assert str(group) == ""

    term = Term("foo", "bar")
    group.add_term(term)
    assert str(group) == "filter( foo:bar )"

    term.proximity = Proximity(2)
    assert str(group) == "filter( foo:bar~2 )"

    term.constant_score = ConstantScore(3.0)
    assert str(group) == "filter( foo:bar~2^=3 )"

    group.remove_term(term)
    group.add_term(Term("foo", "bar"))
    group.constant_score = 3.0
    assert str(group) == "filter( foo:bar )^=3"


def test_filter_group_pretty_print():
    group = Group(GroupKind.FILTER)
    group.add_term(Term("foo", "bar"))
    assert group.pretty() == "filter(\n\tfoo:bar\n)"

    outer = Group().with_occur(Occur.MUST)
    outer.add_child(group)
    assert outer.pretty() == "+(\n\tfilter(\n\t\tfoo:bar\n\t)\n)"


def test_filter_group_occur_prefix():
    group = Group(GroupKind.FILTER, occur=Occur.MUST_NOT)
    group.add_term(Term("type", "draft"))
    assert str(group) == "-filter( type:draft )"


def test_filter_group_without_parenthesis_renders_like_standard():
    group = Group(GroupKind.FILTER, grouping_parenthesis=False)
    group.add_term(Term("foo", "bar"))
    assert str(group) == "foo:bar"


def test_copy_keeps_filter_kind_at_every_level():
    root = Group(GroupKind.FILTER)
    nested = root.new_child()
    nested.add_child(Group()).add_term(Term("foo", "bar"))

    copied = root.copy()
    assert copied.kind is GroupKind.FILTER
    assert copied.children[0].kind is GroupKind.FILTER
    assert copied.children[0].children[0].kind is GroupKind.STANDARD
    assert str(copied) == str(root) == "filter( filter( ( foo:bar ) ) )"


def test_filter_group_equality():
    left = Group(GroupKind.FILTER)
    right = Group(GroupKind.FILTER)
    assert left == right
    assert hash(left) == hash(right)
    assert left != "Hello"

    left.has_grouping_parenthesis = False
    assert left != right
    assert hash(left) != hash(right)
