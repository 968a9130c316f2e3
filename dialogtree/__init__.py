"""
dialogtree - branching dialog trees.

A dialog is a tree of branches. Each branch holds ordered dialog lines
and leads to child branches, one per choice. Trees are built with
DialogBuilder or the declarative DSL, copied with deep_copy(), and
saved to / loaded from JSON or XML files.

Usage:
    from dialogtree import DialogBuilder, save, load

    dialog = (
        DialogBuilder.create("cat")
        .start_branch(lambda b: b
            .add_lines(("Cat", "Meow"))
            .add_branch(lambda c: c.add_lines(("Cat", "No.")))
        )
        .build()
    )
    save(dialog, "cat.json")
    assert load("cat.json") == dialog
"""

from dialogtree.core import (
    DialogError,
    ValidationError,
    UnsupportedFormatError,
    MalformedDataError,
    Payload,
    DialogLine,
    EntryLabel,
    register_payload,
    Branch,
    Dialog,
    FrozenBranch,
    FrozenDialog,
    new_line,
    new_entry,
    new_branch,
    new_dialog,
    speaker,
)
from dialogtree.builder import DialogBuilder, BranchBuilder, dialog, branch
from dialogtree.config import SerializerConfig, ConsoleConfig
from dialogtree.serialization import DialogSerializer, save, load
from dialogtree.console import run_dialog

__version__ = "1.0.0"

__all__ = [
    # Errors
    "DialogError",
    "ValidationError",
    "UnsupportedFormatError",
    "MalformedDataError",
    # Payloads
    "Payload",
    "DialogLine",
    "EntryLabel",
    "register_payload",
    # Tree
    "Branch",
    "Dialog",
    "FrozenBranch",
    "FrozenDialog",
    "new_line",
    "new_entry",
    "new_branch",
    "new_dialog",
    "speaker",
    # Builders
    "DialogBuilder",
    "BranchBuilder",
    "dialog",
    "branch",
    # Config
    "SerializerConfig",
    "ConsoleConfig",
    # Files
    "DialogSerializer",
    "save",
    "load",
    # Console
    "run_dialog",
]
