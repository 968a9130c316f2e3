"""
Branch - a node in a dialog tree.

A branch owns its child branches and holds an ordered list of lines.
The link back to the parent is a weak reference: it names the relation
without owning the parent, so a tree never keeps itself alive through
child -> parent cycles.

The parent link is never serialized. After loading a tree from disk,
call relink_parents() on the root to rebuild it from the children lists.

Usage:
    root = Branch(lines=[DialogLine(id="Cat", content="Meow")])
    root.add_child(Branch(lines=[DialogLine(id="Person", content="No.")]))

    for child in root.children:
        assert child.parent is root
        assert not child.continues
"""

from __future__ import annotations

from typing import Generic, Iterator, Iterable, Optional, TypeVar
from weakref import ref

from dialogtree.core.errors import ValidationError
from dialogtree.core.payload import clone_value, display_text

# Type variables for the entry label and line payloads
EntryT = TypeVar('EntryT')
LineT = TypeVar('LineT')


class Branch(Generic[EntryT, LineT]):
    """
    A node in the dialog tree.

    Attributes:
        entry: Label of the choice leading into this branch (None for root)
        lines: Ordered dialog lines
        children: Ordered child branches (empty means terminal)

    Note:
        The parent is held weakly. A branch detached from the tree that
        owns its parent (e.g. the root went out of scope) reports no parent.
    """

    def __init__(
        self,
        entry: Optional[EntryT] = None,
        lines: Optional[Iterable[LineT]] = None,
        children: Optional[Iterable[Branch[EntryT, LineT]]] = None,
    ):
        self.entry = entry
        self.lines: list[LineT] = list(lines) if lines is not None else []
        self.children: list[Branch[EntryT, LineT]] = []
        self._parent: Optional[ref[Branch[EntryT, LineT]]] = None

        for child in children or ():
            self.add_child(child)

    # -- parent link ---------------------------------------------------

    @property
    def parent(self) -> Optional[Branch[EntryT, LineT]]:
        """The branch owning this one, or None for the root."""
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, value: Optional[Branch[EntryT, LineT]]) -> None:
        self._parent = ref(value) if value is not None else None

    @property
    def has_previous(self) -> bool:
        """Whether this branch has a parent."""
        return self.parent is not None

    @property
    def continues(self) -> bool:
        """Whether the dialog goes on after this branch."""
        return len(self.children) > 0

    @property
    def is_root(self) -> bool:
        return not self.has_previous

    # -- structure -----------------------------------------------------

    def add_child(self, child: Branch[EntryT, LineT]) -> Branch[EntryT, LineT]:
        """
        Append a child branch and point its parent link at this branch.

        Args:
            child: The branch to adopt

        Returns:
            The added child (for chaining)

        Raises:
            ValueError: If the child already belongs to another branch, or
                adding it would make a branch its own descendant
        """
        current = child.parent
        if current is not None and current is not self:
            raise ValueError("Branch already has a parent")

        node: Optional[Branch[EntryT, LineT]] = self
        while node is not None:
            if node is child:
                raise ValueError("Branch cannot be its own descendant")
            node = node.parent

        child.parent = self
        self.children.append(child)
        return child

    def remove_child(self, child: Branch[EntryT, LineT]) -> Branch[EntryT, LineT]:
        """
        Detach a child branch.

        Raises:
            ValueError: If the branch is not a child of this one
        """
        for i, existing in enumerate(self.children):
            if existing is child:
                del self.children[i]
                child.parent = None
                return child
        raise ValueError("Branch is not a child of this branch")

    def relink_parents(self) -> None:
        """
        Rebuild parent links of every descendant from the children lists.

        Used after deserialization, where parent links are not stored.
        Safe to call more than once.
        """
        for child in self.children:
            child.parent = self
            child.relink_parents()

    def deep_copy(self) -> Branch[EntryT, LineT]:
        """
        Create a fully independent copy of this subtree.

        Lines, the entry and every child are copied by value. The copy's
        children point at the copy; the copy itself has no parent.
        The subtree must be a tree: copying a cycle never terminates.
        """
        branch = type(self)(
            entry=clone_value(self.entry),
            lines=[clone_value(line) for line in self.lines],
        )
        for child in self.children:
            copied = child.deep_copy()
            copied.parent = branch
            branch.children.append(copied)
        return branch

    def __deepcopy__(self, memo: dict) -> Branch[EntryT, LineT]:
        return self.deep_copy()

    def validate(self) -> None:
        """
        Check that every branch in this subtree has at least one line.

        Raises:
            ValidationError: For the first empty branch found
        """
        for branch in self.walk():
            if not branch.lines:
                raise ValidationError(
                    f"Branch must contain at least one line (at path {branch.path()})"
                )

    # -- queries -------------------------------------------------------

    def walk(self) -> Iterator[Branch[EntryT, LineT]]:
        """Iterate this branch and all descendants, depth first, pre-order."""
        stack = [self]
        while stack:
            branch = stack.pop()
            yield branch
            stack.extend(reversed(branch.children))

    @property
    def depth(self) -> int:
        """Number of ancestors above this branch."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def path(self) -> tuple[int, ...]:
        """Child indices leading from the root to this branch."""
        indices: list[int] = []
        node = self
        parent = node.parent
        while parent is not None:
            for i, child in enumerate(parent.children):
                if child is node:
                    indices.append(i)
                    break
            node, parent = parent, parent.parent
        return tuple(reversed(indices))

    @property
    def first_line(self) -> Optional[LineT]:
        return self.lines[0] if self.lines else None

    def choice_label(self) -> str:
        """
        Text used to offer this branch as a choice.

        The entry label if there is one, otherwise the first line.
        """
        if self.entry is not None:
            return display_text(self.entry)
        return display_text(self.first_line)

    def __iter__(self) -> Iterator[LineT]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Branch):
            return NotImplemented
        return (
            self.entry == other.entry
            and self.lines == other.lines
            and self.children == other.children
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}("
            f"has_previous={self.has_previous}, "
            f"entry={self.entry!r}, "
            f"lines={self.lines!r}, "
            f"children={len(self.children)})"
        )
