"""
Serialization module - dialog files.

Provides:
- save / load with extension dispatch (.json, .xml)
- DialogSerializer for repeated use with one configuration
- DialogCodec for dict <-> tree conversion
- register_format for additional extensions
"""

from dialogtree.serialization.serializer import (
    DialogSerializer,
    FileFormat,
    JSON_FORMAT,
    XML_FORMAT,
    save,
    load,
    register_format,
    supported_extensions,
    get_format,
)
from dialogtree.serialization.json_codec import DialogCodec, encode_json, decode_json
from dialogtree.serialization.xml_codec import to_xml, from_xml
from dialogtree.serialization.schema import DIALOG_SCHEMA, validate_dialog_data

__all__ = [
    "DialogSerializer",
    "FileFormat",
    "JSON_FORMAT",
    "XML_FORMAT",
    "save",
    "load",
    "register_format",
    "supported_extensions",
    "get_format",
    "DialogCodec",
    "encode_json",
    "decode_json",
    "to_xml",
    "from_xml",
    "DIALOG_SCHEMA",
    "validate_dialog_data",
]
