"""
Dialog serializer - saves and loads dialogs as files.

The file format is chosen by extension:
- .json: indented JSON (see json_codec)
- .xml:  the same structure as XML (see xml_codec)

Any other extension raises UnsupportedFormatError before the file is
touched. Saving serializes and encodes the whole dialog before opening
the file, so a failed save never leaves a partial file behind.

Usage:
    save(dialog, "cat.json")
    loaded = load("cat.json")
    assert loaded.root.children[0].has_previous
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Optional

from dialogtree.config import SerializerConfig
from dialogtree.core.dialog import Dialog
from dialogtree.core.errors import MalformedDataError, UnsupportedFormatError
from dialogtree.core.payload import DialogLine, EntryLabel
from dialogtree.serialization.json_codec import DialogCodec, decode_json, encode_json
from dialogtree.serialization.xml_codec import from_xml, to_xml

class FileFormat:
    """
    Text encoding of dialog data for one file extension.

    Args:
        name: Human readable format name
        encode: (data, config) -> text
        decode: (text, path) -> data
    """

    def __init__(
        self,
        name: str,
        encode: Callable[[dict[str, Any], SerializerConfig], str],
        decode: Callable[[str, Any], Any],
    ):
        self.name = name
        self.encode = encode
        self.decode = decode


JSON_FORMAT = FileFormat("JSON", encode_json, decode_json)
XML_FORMAT = FileFormat("XML", to_xml, from_xml)

# Extension -> format
_formats: dict[str, FileFormat] = {
    '.json': JSON_FORMAT,
    '.xml': XML_FORMAT,
}


def register_format(suffix: str, file_format: FileFormat) -> None:
    """
    Register a file format for an extension.

    Args:
        suffix: Extension including the dot, e.g. ".dlg"
        file_format: Encoder/decoder pair
    """
    if not suffix.startswith('.'):
        raise ValueError(f"Extension must start with '.': {suffix}")
    _formats[suffix.lower()] = file_format


def supported_extensions() -> tuple[str, ...]:
    return tuple(sorted(_formats))


def get_format(path: str | Path) -> FileFormat:
    """
    Get the file format for a path.

    Raises:
        UnsupportedFormatError: If the extension is not registered
    """
    path = Path(path)
    file_format = _formats.get(path.suffix.lower())
    if file_format is None:
        raise UnsupportedFormatError(path, supported_extensions())
    return file_format


class DialogSerializer:
    """
    Saves and loads dialogs.

    Args:
        line_type: Line payload type used when loading
        entry_type: Entry payload type used when loading
        config: Serializer configuration
    """

    def __init__(
        self,
        line_type: Any = DialogLine,
        entry_type: Any = EntryLabel,
        config: Optional[SerializerConfig] = None,
    ):
        self.config = config or SerializerConfig()
        self.codec = DialogCodec(line_type, entry_type, self.config)
        self.logger = logging.getLogger(__name__)

    def dumps(self, dialog: Dialog, suffix: str = '.json') -> str:
        """Serialize a dialog to text in the format registered for suffix."""
        file_format = get_format(f"dialog{suffix}")
        return file_format.encode(self.codec.to_dict(dialog), self.config)

    def loads(self, text: str, suffix: str = '.json', path: Any = None) -> Dialog:
        """Parse text in the format registered for suffix."""
        file_format = get_format(f"dialog{suffix}")
        data = file_format.decode(text, path)
        return self.codec.from_dict(data, path)

    def save(self, dialog: Dialog, path: str | Path) -> None:
        """
        Save a dialog to a file.

        Raises:
            UnsupportedFormatError: If the extension is not .json or .xml
            MalformedDataError: If the text cannot be written in the
                configured encoding (the file is left untouched)
        """
        path = Path(path)
        file_format = get_format(path)

        text = file_format.encode(self.codec.to_dict(dialog), self.config)
        try:
            data = text.encode(self.config.encoding)
        except UnicodeEncodeError as e:
            self.logger.error(f"Failed to save {path}: {e}")
            raise MalformedDataError(f"Cannot encode as {self.config.encoding}: {e.reason}", path) from e
        path.write_bytes(data)

        self.logger.info(
            f"Saved dialog {dialog.name!r} ({dialog.branch_count} branches) "
            f"as {file_format.name} to {path}"
        )

    def load(self, path: str | Path) -> Dialog:
        """
        Load a dialog from a file and rebuild its parent links.

        Raises:
            UnsupportedFormatError: If the extension is not .json or .xml
            MalformedDataError: If the file content is not a dialog
        """
        path = Path(path)
        file_format = get_format(path)

        text = path.read_text(encoding=self.config.encoding)
        try:
            data = file_format.decode(text, path)
            dialog = self.codec.from_dict(data, path)
        except MalformedDataError as e:
            self.logger.error(f"Failed to load {path}: {e}")
            raise

        self.logger.info(
            f"Loaded dialog {dialog.name!r} ({dialog.branch_count} branches) from {path}"
        )
        return dialog


def save(
    dialog: Dialog,
    path: str | Path,
    config: Optional[SerializerConfig] = None,
) -> None:
    """Save a dialog to a .json or .xml file."""
    DialogSerializer(config=config).save(dialog, path)


def load(
    path: str | Path,
    line_type: Any = DialogLine,
    entry_type: Any = EntryLabel,
    config: Optional[SerializerConfig] = None,
) -> Dialog:
    """
    Load a dialog from a .json or .xml file.

    Args:
        path: File to read
        line_type: Line payload type (class or registered name)
        entry_type: Entry payload type (class or registered name)
        config: Serializer configuration
    """
    return DialogSerializer(line_type, entry_type, config).load(path)
