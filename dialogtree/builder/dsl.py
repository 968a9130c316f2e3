"""
Declarative dialog DSL.

Where DialogBuilder nests callbacks, the DSL nests values: branches are
described first and linked with then(), and the tree is assembled and
validated when the dialog's start() is called.

Usage:
    answer = branch().lines(("Player", "It's 2!"), ("Npc", "Right!"))
    dialog_obj = (
        dialog("Puzzle")
        .start(branch().lines(("Npc", "What is 1 + 1?")).then(answer))
    )
"""

from __future__ import annotations

from typing import Any, Optional

from dialogtree.core.branch import Branch
from dialogtree.core.dialog import Dialog
from dialogtree.core.errors import ValidationError
from dialogtree.core.payload import DialogLine, clone_value, coerce_line


class BranchNode:
    """Description of a branch, turned into a Branch by build()."""

    def __init__(self, line_factory: Any = DialogLine):
        self._line_factory = line_factory
        self._entry: Any = None
        self._lines: list[Any] = []
        self._next: list[BranchNode] = []

    def entry(self, value: Any) -> BranchNode:
        self._entry = clone_value(value)
        return self

    def lines(self, *lines: Any) -> BranchNode:
        """
        Append lines; (speaker, text) tuples go through the line factory.

        Raises:
            ValidationError: If a tuple is not exactly (speaker, text)
        """
        for line in lines:
            self._lines.append(coerce_line(line, self._line_factory))
        return self

    def then(self, *branches: BranchNode) -> BranchNode:
        """Append follow-up branches in order."""
        self._next.extend(branches)
        return self

    def build(self, parent: Optional[Branch] = None) -> Branch:
        """
        Assemble this branch and everything after it.

        The same BranchNode may appear in several places; each use is
        built into its own copy.

        Raises:
            ValidationError: If this or any following branch has no lines
        """
        if not self._lines:
            raise ValidationError("Branch must contain at least one line")

        branch: Branch = Branch(
            entry=clone_value(self._entry),
            lines=[clone_value(line) for line in self._lines],
        )
        branch.parent = parent
        for node in self._next:
            branch.children.append(node.build(branch))
        return branch


class DialogNode:
    """Description of a dialog, completed by start()."""

    def __init__(self, name: Optional[str] = None):
        self._name = name

    def start(self, start: Optional[BranchNode]) -> Dialog:
        """
        Build the dialog from its first branch.

        Raises:
            ValidationError: If start is None or any branch has no lines
        """
        if start is None:
            raise ValidationError("Dialog must have a start branch")
        return Dialog(self._name, start.build(None))


def dialog(name: Optional[str] = None) -> DialogNode:
    return DialogNode(name)


def branch(line_factory: Any = DialogLine) -> BranchNode:
    return BranchNode(line_factory)
