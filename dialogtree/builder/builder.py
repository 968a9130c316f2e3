"""
Fluent builders for dialog trees.

Branches are configured through callbacks, so the shape of the code
follows the shape of the tree:

    dialog = (
        DialogBuilder.create("Puzzle")
        .start_branch(lambda b: b
            .add_lines(npc("What is 1 + 1 equal to?"))
            .add_branch(lambda c: c.add_lines(player("It's 2!"), npc("Right!")))
            .add_branch(lambda c: c.add_lines(player("It's 3!"), npc("No.")))
        )
        .build()
    )

Validation is deferred: a branch may be empty while it is being
configured, and is only checked when its builder's build() runs.
"""

from __future__ import annotations

from typing import Callable, Generic, Optional, Any

from dialogtree.core.branch import Branch, EntryT, LineT
from dialogtree.core.dialog import Dialog
from dialogtree.core.errors import ValidationError
from dialogtree.core.payload import DialogLine, clone_value, coerce_line


class BranchBuilder(Generic[EntryT, LineT]):
    """
    Builds one Branch and, through add_branch(), its children.

    Args:
        parent: The branch that will own the built branch, None for the root
        line_factory: Builds lines from (speaker, text) tuples; None keeps
            tuples as line values
    """

    def __init__(
        self,
        parent: Optional[Branch[EntryT, LineT]] = None,
        line_factory: Any = DialogLine,
    ):
        self._line_factory = line_factory
        self._branch: Branch[EntryT, LineT] = Branch()
        self._branch.parent = parent
        self._built = False

    def _check_open(self) -> None:
        if self._built:
            raise RuntimeError("Branch builder has already been built")

    def entry(self, value: EntryT) -> BranchBuilder[EntryT, LineT]:
        """Set the label of the choice leading into this branch."""
        self._check_open()
        self._branch.entry = clone_value(value)
        return self

    def add_lines(self, *lines: LineT | tuple[str, str]) -> BranchBuilder[EntryT, LineT]:
        """
        Append dialog lines in call order.

        Each value is copied on insertion. A (speaker, text) tuple is
        turned into a line by the builder's line_factory (DialogLine by
        default). Pass line_factory=None when tuples are the line type.

        Raises:
            ValidationError: If a tuple is not exactly (speaker, text)
        """
        self._check_open()
        for line in lines:
            self._branch.lines.append(coerce_line(line, self._line_factory))
        return self

    def add_branch(
        self,
        configure: Callable[[BranchBuilder[EntryT, LineT]], Any],
    ) -> BranchBuilder[EntryT, LineT]:
        """
        Configure and append a child branch.

        Args:
            configure: Receives a new builder whose parent is this branch

        Raises:
            ValidationError: If the configured child has no lines
        """
        self._check_open()
        child_builder: BranchBuilder[EntryT, LineT] = BranchBuilder(self._branch, self._line_factory)
        configure(child_builder)

        child = child_builder.build()
        child.parent = self._branch
        self._branch.children.append(child)
        return self

    def build(self) -> Branch[EntryT, LineT]:
        """
        Finish the branch.

        Raises:
            ValidationError: If no lines were added
        """
        if not self._branch.lines:
            raise ValidationError("Branch must contain at least one line")
        self._built = True
        return self._branch


class DialogBuilder(Generic[EntryT, LineT]):
    """
    Builds a Dialog from a name and a root branch.

    build() returns a deep copy, so later changes to anything reachable
    from this builder never reach a dialog it already returned.

    Args:
        name: Dialog name
        line_factory: Passed on to every BranchBuilder
    """

    def __init__(self, name: Optional[str] = None, line_factory: Any = DialogLine):
        self._name = name
        self._line_factory = line_factory
        self._root: Optional[Branch[EntryT, LineT]] = None

    @classmethod
    def create(cls, name: Optional[str] = None, line_factory: Any = DialogLine) -> DialogBuilder[EntryT, LineT]:
        return cls(name, line_factory)

    def name(self, name: Optional[str]) -> DialogBuilder[EntryT, LineT]:
        self._name = name
        return self

    def start_branch(
        self,
        configure: Callable[[BranchBuilder[EntryT, LineT]], Any],
    ) -> DialogBuilder[EntryT, LineT]:
        """
        Configure the root branch of the dialog.

        Raises:
            ValidationError: If the root (or any child) has no lines
        """
        builder: BranchBuilder[EntryT, LineT] = BranchBuilder(None, self._line_factory)
        configure(builder)
        self._root = builder.build()
        return self

    def build(self) -> Dialog[EntryT, LineT]:
        """
        Build the dialog.

        Raises:
            ValidationError: If start_branch() was never called
        """
        if self._root is None:
            raise ValidationError("Dialog must have a start branch")
        return Dialog(self._name, self._root).deep_copy()
