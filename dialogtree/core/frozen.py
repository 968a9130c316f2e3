"""
Read-only projection of a dialog tree.

FrozenDialog and FrozenBranch are value copies of a Dialog that expose
tuples instead of lists and no mutators. They are meant for playback,
where nothing should change the tree being walked.

Usage:
    frozen = dialog.freeze()
    for line in frozen.root:
        print(line)

    editable = frozen.thaw()
"""

from __future__ import annotations

from typing import Generic, Iterator, Optional
from weakref import ref

from dialogtree.core.branch import Branch, EntryT, LineT
from dialogtree.core.dialog import Dialog
from dialogtree.core.payload import clone_value, display_text


class FrozenBranch(Generic[EntryT, LineT]):
    """Immutable branch built by value from a Branch."""

    __slots__ = ('_entry', '_lines', '_children', '_parent', '__weakref__')

    def __init__(
        self,
        entry: Optional[EntryT],
        lines: tuple[LineT, ...],
        children: tuple[FrozenBranch[EntryT, LineT], ...] = (),
    ):
        object.__setattr__(self, '_entry', entry)
        object.__setattr__(self, '_lines', tuple(lines))
        object.__setattr__(self, '_children', tuple(children))
        object.__setattr__(self, '_parent', None)
        for child in self._children:
            object.__setattr__(child, '_parent', ref(self))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    @classmethod
    def from_branch(cls, branch: Branch[EntryT, LineT]) -> FrozenBranch[EntryT, LineT]:
        return cls(
            entry=clone_value(branch.entry),
            lines=tuple(clone_value(line) for line in branch.lines),
            children=tuple(cls.from_branch(child) for child in branch.children),
        )

    def thaw(self) -> Branch[EntryT, LineT]:
        """Create an editable Branch copy of this subtree."""
        branch: Branch[EntryT, LineT] = Branch(
            entry=clone_value(self._entry),
            lines=[clone_value(line) for line in self._lines],
        )
        for child in self._children:
            branch.add_child(child.thaw())
        return branch

    def deep_copy(self) -> FrozenBranch[EntryT, LineT]:
        return type(self)(
            entry=clone_value(self._entry),
            lines=tuple(clone_value(line) for line in self._lines),
            children=tuple(child.deep_copy() for child in self._children),
        )

    @property
    def entry(self) -> Optional[EntryT]:
        return self._entry

    @property
    def lines(self) -> tuple[LineT, ...]:
        return self._lines

    @property
    def children(self) -> tuple[FrozenBranch[EntryT, LineT], ...]:
        return self._children

    @property
    def parent(self) -> Optional[FrozenBranch[EntryT, LineT]]:
        if self._parent is None:
            return None
        return self._parent()

    @property
    def has_previous(self) -> bool:
        return self.parent is not None

    @property
    def continues(self) -> bool:
        return len(self._children) > 0

    def choice_label(self) -> str:
        if self._entry is not None:
            return display_text(self._entry)
        return display_text(self._lines[0] if self._lines else None)

    def __iter__(self) -> Iterator[LineT]:
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrozenBranch):
            return NotImplemented
        return (
            self._entry == other._entry
            and self._lines == other._lines
            and self._children == other._children
        )

    def __hash__(self) -> int:
        return hash((self._lines, self._children))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}("
            f"has_previous={self.has_previous}, "
            f"lines={self._lines!r}, "
            f"children={len(self._children)})"
        )


class FrozenDialog(Generic[EntryT, LineT]):
    """Immutable named dialog tree."""

    __slots__ = ('_name', '_root')

    def __init__(self, name: Optional[str], root: FrozenBranch[EntryT, LineT]):
        object.__setattr__(self, '_name', name)
        object.__setattr__(self, '_root', root)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    @classmethod
    def from_dialog(cls, dialog: Dialog[EntryT, LineT]) -> FrozenDialog[EntryT, LineT]:
        return cls(dialog.name, FrozenBranch.from_branch(dialog.root))

    def thaw(self) -> Dialog[EntryT, LineT]:
        """Create an editable Dialog copy."""
        return Dialog(self._name, self._root.thaw())

    def deep_copy(self) -> FrozenDialog[EntryT, LineT]:
        return type(self)(self._name, self._root.deep_copy())

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def root(self) -> FrozenBranch[EntryT, LineT]:
        return self._root

    start = root

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrozenDialog):
            return NotImplemented
        return self._name == other._name and self._root == other._root

    def __hash__(self) -> int:
        return hash((self._name, self._root))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, root={self._root!r})"
