import pytest
from dialogtree.core import FrozenDialog, FrozenBranch


def test_freeze_is_equal_projection(deep_dialog):
    frozen = deep_dialog.freeze()

    assert isinstance(frozen, FrozenDialog)
    assert frozen.name == "deep"
    assert isinstance(frozen.root.lines, tuple)
    assert isinstance(frozen.root.children, tuple)
    assert [l.content for l in frozen.root] == ["root", "again"]


def test_frozen_parent_links(deep_dialog):
    frozen = deep_dialog.freeze()

    assert not frozen.root.has_previous
    for child in frozen.root.children:
        assert child.parent is frozen.root
        for grandchild in child.children:
            assert grandchild.parent is child


def test_frozen_is_read_only(deep_dialog):
    frozen = deep_dialog.freeze()

    with pytest.raises(AttributeError):
        frozen.root.lines = ()
    with pytest.raises(AttributeError):
        frozen.name = "changed"
    with pytest.raises(AttributeError):
        frozen.root.children[0].entry = None
    with pytest.raises(AttributeError):
        del frozen._name
    with pytest.raises(AttributeError):
        del frozen.root._lines
    assert frozen.name == deep_dialog.name


def test_freeze_does_not_share_with_source(deep_dialog):
    frozen = deep_dialog.freeze()
    deep_dialog.root.lines.clear()
    deep_dialog.root.children.clear()

    assert len(frozen.root.lines) == 2
    assert frozen.root.continues


def test_thaw_round_trip(deep_dialog, check_parent_links):
    thawed = deep_dialog.freeze().thaw()

    assert thawed == deep_dialog
    check_parent_links(thawed.root)


def test_frozen_deep_copy(deep_dialog):
    frozen = deep_dialog.freeze()
    copied = frozen.deep_copy()

    assert copied == frozen
    assert copied.root is not frozen.root
    assert copied.root.children[0].parent is copied.root


def test_frozen_choice_label(deep_dialog):
    middle, other = deep_dialog.freeze().root.children
    assert middle.choice_label() == "Middle"
    assert other.choice_label() == "other"
    assert isinstance(middle, FrozenBranch)
