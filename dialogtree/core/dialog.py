"""
Dialog - a named handle to a dialog tree.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, Iterator, Optional

from dialogtree.core.branch import Branch, EntryT, LineT

if TYPE_CHECKING:
    from dialogtree.core.frozen import FrozenDialog


class Dialog(Generic[EntryT, LineT]):
    """
    A named dialog tree.

    The dialog owns every branch below its root. Copies are always deep,
    so no branch is shared between two dialogs.

    Usage:
        dialog = Dialog("cat", Branch(lines=[DialogLine(id="Cat", content="Meow")]))
        copy = dialog.deep_copy()
    """

    def __init__(self, name: Optional[str], root: Branch[EntryT, LineT]):
        self.name = name
        self.root = root

    @property
    def start(self) -> Branch[EntryT, LineT]:
        """Alias for root."""
        return self.root

    @start.setter
    def start(self, value: Branch[EntryT, LineT]) -> None:
        self.root = value

    def deep_copy(self) -> Dialog[EntryT, LineT]:
        """Create a fully independent copy of this dialog."""
        return type(self)(self.name, self.root.deep_copy())

    def __deepcopy__(self, memo: dict) -> Dialog[EntryT, LineT]:
        return self.deep_copy()

    def walk(self) -> Iterator[Branch[EntryT, LineT]]:
        """Iterate every branch, depth first, starting at the root."""
        return self.root.walk()

    @property
    def branch_count(self) -> int:
        return sum(1 for _ in self.walk())

    def freeze(self) -> FrozenDialog[EntryT, LineT]:
        """Create a read-only copy of this dialog."""
        from dialogtree.core.frozen import FrozenDialog
        return FrozenDialog.from_dialog(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dialog):
            return NotImplemented
        return self.name == other.name and self.root == other.root

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, root={self.root!r})"
