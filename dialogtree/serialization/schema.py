"""
JSON schema of the dialog file structure.

Only the tree shape is described here. Line and entry payloads are left
open ({}) and validated against their Python types after the shape
check passes.
"""

from __future__ import annotations

from typing import Any

import jsonschema

from dialogtree.core.errors import MalformedDataError

BRANCH_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "entry": {},
        "lines": {"type": "array"},
        "children": {
            "type": "array",
            "items": {"$ref": "#/$defs/branch"},
        },
    },
    "additionalProperties": False,
}

DIALOG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Dialog",
    "type": "object",
    "properties": {
        "name": {"type": ["string", "null"]},
        "start": {"$ref": "#/$defs/branch"},
        "root": {"$ref": "#/$defs/branch"},
    },
    "oneOf": [
        {"required": ["start"]},
        {"required": ["root"]},
    ],
    "additionalProperties": False,
    "$defs": {
        "branch": BRANCH_SCHEMA,
    },
}


def validate_dialog_data(data: Any, path: Any = None) -> None:
    """
    Check a decoded document against DIALOG_SCHEMA.

    Raises:
        MalformedDataError: If the document does not have the dialog shape
    """
    try:
        jsonschema.validate(instance=data, schema=DIALOG_SCHEMA)
    except jsonschema.ValidationError as e:
        location = "/".join(str(part) for part in e.absolute_path) or "<document>"
        raise MalformedDataError(f"Invalid dialog at {location}: {e.message}", path) from e
