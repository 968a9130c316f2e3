"""
Shorthand constructors for hand-written dialog trees.
"""

from __future__ import annotations

from typing import Optional

from dialogtree.core.branch import Branch
from dialogtree.core.dialog import Dialog
from dialogtree.core.payload import DialogLine, EntryLabel


def new_line(id: str, content: str) -> DialogLine:
    return DialogLine(id=id, content=content)


def new_entry(text: str) -> EntryLabel:
    return EntryLabel(text=text)


def new_branch(
    lines: list[DialogLine],
    children: Optional[list[Branch[EntryLabel, DialogLine]]] = None,
    entry: Optional[EntryLabel] = None,
) -> Branch[EntryLabel, DialogLine]:
    """Create a branch that adopts the given children."""
    return Branch(entry=entry, lines=lines, children=children)


def new_dialog(name: Optional[str], start: Branch[EntryLabel, DialogLine]) -> Dialog[EntryLabel, DialogLine]:
    return Dialog(name, start)


def speaker(id: str):
    """
    Create a line factory bound to one speaker.

    Usage:
        npc = speaker("Npc")
        npc("Hello adventurer!")
    """
    def make_line(content: str) -> DialogLine:
        return DialogLine(id=id, content=content)

    make_line.__name__ = f"{id.lower()}_line"
    return make_line
