import pytest
from dialogtree.builder import branch, dialog
from dialogtree.core import DialogLine, EntryLabel, ValidationError


def test_dsl_builds_linked_tree(check_parent_links):
    yes = branch().lines(("Cat", "Yes."))
    no = branch().entry(EntryLabel(text="Refuse")).lines(("Cat", "No."))
    result = dialog("cat").start(
        branch().lines(("Cat", "Meow"), ("Person", "Hey!")).then(yes, no)
    )

    assert result.name == "cat"
    assert result.root.lines[1] == DialogLine(id="Person", content="Hey!")
    assert [c.choice_label() for c in result.root.children] == ["Yes.", "Refuse"]
    check_parent_links(result.root)


def test_dsl_requires_start():
    with pytest.raises(ValidationError):
        dialog("empty").start(None)


def test_dsl_validates_every_branch():
    with pytest.raises(ValidationError):
        dialog().start(branch().lines(("A", "a")).then(branch()))


def test_reused_node_is_built_twice():
    shared = branch().lines(("A", "same"))
    result = dialog().start(
        branch().lines(("R", "root")).then(
            branch().lines(("B", "b")).then(shared),
            branch().lines(("C", "c")).then(shared),
        )
    )

    first = result.root.children[0].children[0]
    second = result.root.children[1].children[0]
    assert first == second
    assert first is not second
    assert first.parent is result.root.children[0]
    assert second.parent is result.root.children[1]


def test_dsl_copies_line_values():
    line = DialogLine(id="A", content="a")
    result = dialog().start(branch().lines(line))
    assert result.root.lines[0] == line
    assert result.root.lines[0] is not line


@pytest.mark.parametrize("bad", [("Npc",), ("Npc", "hi", "extra"), ("Npc", 5), ()])
def test_malformed_line_tuples(bad):
    with pytest.raises(ValidationError):
        branch().lines(bad)


def test_tuple_lines_can_be_kept():
    result = dialog("pairs").start(branch(line_factory=None).lines(("Npc", "hi")))
    assert result.root.lines == [("Npc", "hi")]
