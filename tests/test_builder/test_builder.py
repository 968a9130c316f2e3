import pytest
from dialogtree.builder import DialogBuilder, BranchBuilder
from dialogtree.core import DialogLine, EntryLabel, ValidationError


def test_cat_scenario(cat_dialog):
    root = cat_dialog.root

    assert cat_dialog.name == "cat"
    assert root.lines == [
        DialogLine(id="Cat", content="Meow"),
        DialogLine(id="Person", content="Hey!"),
    ]
    assert root.continues
    assert not root.has_previous
    assert [c.lines[0].content for c in root.children] == ["No.", "Yes.", "Maybe."]
    for child in root.children:
        assert not child.continues
        assert child.has_previous


def test_build_links_parents(puzzle_dialog, check_parent_links):
    check_parent_links(puzzle_dialog.root)


def test_entry_label(puzzle_dialog):
    last = puzzle_dialog.root.children[-1]
    assert last.entry == EntryLabel(text="Guess wildly")
    assert last.choice_label() == "Guess wildly"
    assert puzzle_dialog.root.children[0].entry is None


def test_empty_branch_fails_at_build():
    builder = BranchBuilder()
    with pytest.raises(ValidationError, match="at least one line"):
        builder.build()


def test_empty_child_fails():
    with pytest.raises(ValidationError):
        DialogBuilder.create("broken").start_branch(lambda b: b
            .add_lines(("Npc", "Hi"))
            .add_branch(lambda c: None)
        )


def test_empty_root_fails():
    with pytest.raises(ValidationError):
        DialogBuilder.create().start_branch(lambda b: None)


def test_lines_may_be_added_after_children():
    builder = BranchBuilder()
    builder.add_branch(lambda c: c.add_lines(("A", "child")))
    builder.add_lines(("B", "late"))
    branch = builder.build()

    assert branch.lines[0].content == "late"
    assert branch.children[0].parent is branch


def test_build_without_start_fails():
    with pytest.raises(ValidationError):
        DialogBuilder("nothing").build()


def test_order_is_preserved():
    dialog = (
        DialogBuilder.create("order")
        .start_branch(lambda b: b
            .add_lines(("A", "1"))
            .add_lines(("A", "2"), ("A", "3"))
            .add_branch(lambda c: c.add_lines(("B", "first")))
            .add_branch(lambda c: c.add_lines(("B", "second")))
        )
        .build()
    )

    assert [l.content for l in dialog.root.lines] == ["1", "2", "3"]
    assert [c.lines[0].content for c in dialog.root.children] == ["first", "second"]


def test_build_returns_independent_copies():
    builder = DialogBuilder.create("copy").start_branch(lambda b: b.add_lines(("A", "a")))
    first = builder.build()
    second = builder.build()

    assert first == second
    assert first.root is not second.root

    first.root.lines.append(DialogLine(id="X", content="x"))
    assert len(second.root.lines) == 1
    assert len(builder.build().root.lines) == 1


def test_inserted_values_are_copied():
    shared = DialogLine(id="Npc", content="Same line")
    dialog = (
        DialogBuilder.create()
        .start_branch(lambda b: b
            .add_lines(shared)
            .add_branch(lambda c: c.add_lines(shared))
        )
        .build()
    )

    assert dialog.root.lines[0] == shared
    assert dialog.root.lines[0] is not shared
    assert dialog.root.lines[0] is not dialog.root.children[0].lines[0]


def test_child_builder_knows_parent():
    seen = []

    def configure(child):
        seen.append(child._branch.parent)
        child.add_lines(("A", "a"))

    parent = BranchBuilder()
    parent.add_branch(configure)
    branch = parent.add_lines(("P", "p")).build()

    assert seen[0] is branch


def test_builder_is_frozen_after_build():
    builder = BranchBuilder().add_lines(("A", "a"))
    builder.build()

    with pytest.raises(RuntimeError):
        builder.add_lines(("A", "b"))
    with pytest.raises(RuntimeError):
        builder.add_branch(lambda c: c.add_lines(("A", "c")))


def test_generic_payloads():
    dialog = (
        DialogBuilder.create("strings")
        .start_branch(lambda b: b
            .add_lines("plain text")
            .add_branch(lambda c: c.entry("pick me").add_lines("answer"))
        )
        .build()
    )

    assert dialog.root.lines == ["plain text"]
    assert dialog.root.children[0].choice_label() == "pick me"


@pytest.mark.parametrize("bad", [("A",), ("A", "a", "extra"), ("A", 1)])
def test_malformed_line_tuples(bad):
    with pytest.raises(ValidationError):
        BranchBuilder().add_lines(bad)


def test_tuple_line_type():
    dialog = (
        DialogBuilder.create("pairs", line_factory=None)
        .start_branch(lambda b: b
            .add_lines(("Npc", "hi"))
            .add_branch(lambda c: c.add_lines(("Player", "bye")))
        )
        .build()
    )

    assert dialog.root.lines == [("Npc", "hi")]
    assert dialog.root.children[0].lines == [("Player", "bye")]


def test_custom_line_factory():
    def shout(id, content):
        return DialogLine(id=id, content=content.upper())

    dialog = DialogBuilder("loud", line_factory=shout).start_branch(lambda b: b.add_lines(("A", "hey"))).build()
    assert dialog.root.lines[0].content == "HEY"
