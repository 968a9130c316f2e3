"""
Core tree module.

Exports:
- Branch, Dialog: The mutable dialog tree
- FrozenBranch, FrozenDialog: Read-only projection
- Payload, DialogLine, EntryLabel: Value types stored in the tree
- DialogError, ValidationError, UnsupportedFormatError, MalformedDataError
"""

from dialogtree.core.errors import (
    DialogError,
    ValidationError,
    UnsupportedFormatError,
    MalformedDataError,
)
from dialogtree.core.payload import (
    Payload,
    DialogLine,
    EntryLabel,
    register_payload,
    get_payload_type,
    get_all_payload_types,
    clone_value,
    coerce_line,
    display_text,
)
from dialogtree.core.branch import Branch
from dialogtree.core.dialog import Dialog
from dialogtree.core.frozen import FrozenBranch, FrozenDialog
from dialogtree.core.factories import new_line, new_entry, new_branch, new_dialog, speaker

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
    "get_payload_type",
    "get_all_payload_types",
    "clone_value",
    "coerce_line",
    "display_text",
    # Tree
    "Branch",
    "Dialog",
    "FrozenBranch",
    "FrozenDialog",
    # Factories
    "new_line",
    "new_entry",
    "new_branch",
    "new_dialog",
    "speaker",
]
