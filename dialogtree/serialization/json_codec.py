"""
Conversion between dialog trees and plain JSON data.

Field names are stable:

    {
      "name": "cat",
      "start": {
        "lines": [{"id": "Cat", "content": "Meow"}],
        "children": [
          {"entry": {"text": "Refuse"}, "lines": [...]}
        ]
      }
    }

Empty "lines"/"children" lists and None values are left out when
writing and read back as empty/None. Parent links are never written.

Payloads are (de)serialized through pydantic TypeAdapters, so any type
pydantic understands can be used for lines and entries.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import Any, Optional

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from dialogtree.config import SerializerConfig
from dialogtree.core.branch import Branch
from dialogtree.core.dialog import Dialog
from dialogtree.core.errors import MalformedDataError
from dialogtree.core.payload import DialogLine, EntryLabel, get_payload_type
from dialogtree.serialization.schema import validate_dialog_data

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _adapter(value_type: Any) -> TypeAdapter:
    return TypeAdapter(value_type)


def resolve_payload_type(value_type: Any) -> Any:
    """Accept a payload class or the name it was registered under."""
    if isinstance(value_type, str):
        resolved = get_payload_type(value_type)
        if resolved is None:
            raise ValueError(f"Unknown payload type: {value_type}")
        return resolved
    return value_type


def dump_value(value: Any) -> Any:
    """Convert a payload value to JSON-compatible data."""
    return _adapter(type(value)).dump_python(value, mode='json')


class DialogCodec:
    """
    Converts Dialog objects to and from JSON-compatible dicts.

    Args:
        line_type: Type of the lines when reading (class or registered name)
        entry_type: Type of the entry labels when reading
        config: Serializer configuration
    """

    def __init__(
        self,
        line_type: Any = DialogLine,
        entry_type: Any = EntryLabel,
        config: Optional[SerializerConfig] = None,
    ):
        self.line_type = resolve_payload_type(line_type)
        self.entry_type = resolve_payload_type(entry_type)
        self.config = config or SerializerConfig()

    # -- writing -------------------------------------------------------

    def to_dict(self, dialog: Dialog) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if dialog.name is not None or not self.config.omit_empty:
            data['name'] = dialog.name
        data['start'] = self.branch_to_dict(dialog.root)
        return data

    def branch_to_dict(self, branch: Branch) -> dict[str, Any]:
        omit = self.config.omit_empty
        data: dict[str, Any] = {}

        if branch.entry is not None:
            data['entry'] = dump_value(branch.entry)
        elif not omit:
            data['entry'] = None

        if branch.lines or not omit:
            data['lines'] = [dump_value(line) for line in branch.lines]

        if branch.children or not omit:
            data['children'] = [self.branch_to_dict(child) for child in branch.children]

        return data

    # -- reading -------------------------------------------------------

    def from_dict(self, data: Any, path: Any = None) -> Dialog:
        """
        Build a dialog from decoded data and relink its parents.

        Raises:
            MalformedDataError: If the data does not describe a dialog
        """
        if self.config.validate_schema:
            validate_dialog_data(data, path)

        try:
            start = data['start'] if 'start' in data else data['root']
            dialog = Dialog(data.get('name'), self.branch_from_dict(start, path))
        except MalformedDataError:
            raise
        except (KeyError, TypeError, AttributeError) as e:
            raise MalformedDataError(f"Invalid dialog structure: {e}", path) from e

        dialog.root.relink_parents()
        logger.debug(f"Relinked parent links of dialog {dialog.name!r}")
        return dialog

    def branch_from_dict(self, data: dict[str, Any], path: Any = None) -> Branch:
        try:
            raw_entry = data.get('entry')
            entry = (
                _adapter(self.entry_type).validate_python(raw_entry)
                if raw_entry is not None else None
            )
            lines = [
                _adapter(self.line_type).validate_python(raw)
                for raw in data.get('lines') or []
            ]
        except PydanticValidationError as e:
            raise MalformedDataError(f"Invalid payload: {e}", path) from e

        branch = Branch(entry=entry, lines=lines)
        for child_data in data.get('children') or []:
            branch.children.append(self.branch_from_dict(child_data, path))
        return branch


def encode_json(data: dict[str, Any], config: Optional[SerializerConfig] = None) -> str:
    """Write dialog data as JSON text."""
    config = config or SerializerConfig()
    return json.dumps(data, indent=config.indent, ensure_ascii=config.ensure_ascii)


def decode_json(text: str, path: Any = None) -> Any:
    """
    Read JSON text.

    Raises:
        MalformedDataError: If the text is not valid JSON
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedDataError(f"Invalid JSON: {e}", path) from e
