import os
import sys
import pytest

# Ensure dialogtree can be imported without installing
sys.path.append(os.getcwd())

from dialogtree.core import Branch, Dialog, DialogLine, EntryLabel


@pytest.fixture
def cat_dialog():
    """The "cat" dialog: two root lines and three one-line answers."""
    from dialogtree.samples import cat_dialog
    return cat_dialog()


@pytest.fixture
def puzzle_dialog():
    """Four-answer puzzle dialog, the last answer has an entry label."""
    from dialogtree.samples import puzzle_dialog
    return puzzle_dialog()


@pytest.fixture
def deep_dialog():
    """Hand-built dialog three levels deep."""
    leaf_a = Branch(lines=[DialogLine(id="A", content="leaf a")])
    leaf_b = Branch(
        entry=EntryLabel(text="Go to b"),
        lines=[DialogLine(id="B", content="leaf b")],
    )
    middle = Branch(
        entry=EntryLabel(text="Middle"),
        lines=[DialogLine(id="M", content="middle")],
        children=[leaf_a, leaf_b],
    )
    other = Branch(lines=[DialogLine(id="O", content="other")])
    root = Branch(
        lines=[DialogLine(id="R", content="root"), DialogLine(id="R", content="again")],
        children=[middle, other],
    )
    return Dialog("deep", root)


@pytest.fixture
def check_parent_links():
    """Assert that every child of every branch points back at it."""
    def check(branch):
        for node in branch.walk():
            for child in node.children:
                assert child.parent is node
    return check
