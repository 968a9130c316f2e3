"""
XML form of the dialog file structure.

Mirrors the JSON shape one to one:

    <dialog name="cat">
      <start>
        <lines>
          <line id="Cat" content="Meow" />
        </lines>
        <children>
          <branch>
            <entry text="Refuse" />
            <lines>...</lines>
          </branch>
        </children>
      </start>
    </dialog>

Payloads are written from their JSON data. A flat object of strings
becomes attributes, a plain string becomes element text, anything else
is written with an explicit kind="..." attribute so it reads back with
the same types.

XML cannot carry every string: control characters are illegal and
carriage returns are normalised away by parsers. Such strings are
written as kind="json" with an ASCII JSON string literal as text, and
such objects fall back to the kind="object" form.
"""

from __future__ import annotations

import json
import re
from typing import Any
from xml.etree import ElementTree as ET

from dialogtree.config import SerializerConfig
from dialogtree.core.errors import MalformedDataError

_NAME_PATTERN = re.compile(r'^[A-Za-z_][\w.-]*$')
_KIND = 'kind'

# Characters that survive a round trip as element text (XML 1.0 Char minus CR)
_TEXT_UNSAFE = re.compile('[^\t\n\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]')
# Attribute values also lose tabs and newlines to normalisation
_ATTRIBUTE_UNSAFE = re.compile('[^\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]')


# -- values --------------------------------------------------------------

def _is_attribute_object(value: Any) -> bool:
    return (
        isinstance(value, dict)
        and bool(value)
        and _KIND not in value
        and all(isinstance(k, str) and _NAME_PATTERN.match(k) for k in value)
        and all(isinstance(v, str) and not _ATTRIBUTE_UNSAFE.search(v) for v in value.values())
    )


def encode_value(tag: str, value: Any, attributes: bool = True) -> ET.Element:
    """Write JSON data into an element named tag."""
    element = ET.Element(tag)

    if attributes and _is_attribute_object(value):
        for key, item in value.items():
            element.set(key, item)
    elif isinstance(value, str):
        if _TEXT_UNSAFE.search(value):
            element.set(_KIND, 'json')
            element.text = json.dumps(value)
        else:
            element.text = value
    elif value is None:
        element.set(_KIND, 'null')
    elif isinstance(value, bool):
        element.set(_KIND, 'bool')
        element.text = 'true' if value else 'false'
    elif isinstance(value, (int, float)):
        element.set(_KIND, 'number')
        element.text = repr(value)
    elif isinstance(value, list):
        element.set(_KIND, 'list')
        for item in value:
            element.append(encode_value('item', item))
    elif isinstance(value, dict):
        element.set(_KIND, 'object')
        for key, item in value.items():
            # "name" is taken by the field itself
            field = encode_value('field', item, attributes=not (isinstance(item, dict) and 'name' in item))
            field.set('name', str(key))
            element.append(field)
    else:
        raise TypeError(f"Cannot write {type(value).__name__} to XML")

    return element


def decode_value(element: ET.Element) -> Any:
    """Read JSON data back from an element written by encode_value()."""
    kind = element.get(_KIND)
    text = element.text or ''

    if kind is None:
        if element.attrib:
            return dict(element.attrib)
        return text
    if kind == 'json':
        try:
            return json.loads(text)
        except ValueError as e:
            raise MalformedDataError(f"Invalid JSON string: {text!r}") from e
    if kind == 'null':
        return None
    if kind == 'bool':
        if text not in ('true', 'false'):
            raise MalformedDataError(f"Invalid boolean: {text!r}")
        return text == 'true'
    if kind == 'number':
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return float(text)
        except ValueError:
            raise MalformedDataError(f"Invalid number: {text!r}") from None
    if kind == 'list':
        return [decode_value(child) for child in element]
    if kind == 'object':
        result = {}
        for child in element:
            name = child.get('name')
            if name is None:
                raise MalformedDataError("Object field without a name")
            result[name] = decode_value(_without(child, 'name'))
        return result

    raise MalformedDataError(f"Unknown value kind: {kind!r}")


def _without(element: ET.Element, attribute: str) -> ET.Element:
    copy = ET.Element(element.tag, {k: v for k, v in element.attrib.items() if k != attribute})
    copy.text = element.text
    copy.extend(list(element))
    return copy


# -- tree ------------------------------------------------------------------

def _branch_to_element(tag: str, data: dict[str, Any]) -> ET.Element:
    element = ET.Element(tag)
    if 'entry' in data:
        element.append(encode_value('entry', data['entry']))
    if 'lines' in data:
        lines = ET.SubElement(element, 'lines')
        for line in data['lines']:
            lines.append(encode_value('line', line))
    if 'children' in data:
        children = ET.SubElement(element, 'children')
        for child in data['children']:
            children.append(_branch_to_element('branch', child))
    return element


def _branch_from_element(element: ET.Element) -> dict[str, Any]:
    data: dict[str, Any] = {}
    for part in element:
        if part.tag == 'entry':
            data['entry'] = decode_value(part)
        elif part.tag == 'lines':
            data['lines'] = [decode_value(_expect(line, 'line')) for line in part]
        elif part.tag == 'children':
            data['children'] = [_branch_from_element(_expect(child, 'branch')) for child in part]
        else:
            raise MalformedDataError(f"Unexpected element <{part.tag}> in <{element.tag}>")
    return data


def _expect(element: ET.Element, tag: str) -> ET.Element:
    if element.tag != tag:
        raise MalformedDataError(f"Expected <{tag}>, found <{element.tag}>")
    return element


def to_xml(data: dict[str, Any], config: SerializerConfig | None = None) -> str:
    """Write dialog data (as produced by DialogCodec.to_dict) as XML text."""
    config = config or SerializerConfig()
    root = ET.Element('dialog')
    name = data.get('name')
    if name is not None:
        if _ATTRIBUTE_UNSAFE.search(name):
            root.append(encode_value('name', name))
        else:
            root.set('name', name)
    start = data['start'] if 'start' in data else data['root']
    root.append(_branch_to_element('start', start))

    if config.indent:
        ET.indent(root, space=' ' * config.indent)
    declaration = f'<?xml version="1.0" encoding="{config.encoding}"?>\n'
    return declaration + ET.tostring(root, encoding='unicode')


def from_xml(text: str, path: Any = None) -> dict[str, Any]:
    """
    Read dialog data from XML text.

    Raises:
        MalformedDataError: If the text is not XML or not a dialog document
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise MalformedDataError(f"Invalid XML: {e}", path) from e

    try:
        if root.tag != 'dialog':
            raise MalformedDataError(f"Expected <dialog> root element, found <{root.tag}>")

        data: dict[str, Any] = {}
        if 'name' in root.attrib:
            data['name'] = root.get('name')

        starts = []
        for child in root:
            if child.tag == 'name':
                data['name'] = decode_value(child)
            elif child.tag in ('start', 'root'):
                starts.append(child)
            else:
                raise MalformedDataError(f"Unexpected element <{child.tag}> in <dialog>")
        if len(starts) != 1:
            raise MalformedDataError("Dialog must contain exactly one <start> element")
        data['start'] = _branch_from_element(starts[0])
        return data
    except MalformedDataError as e:
        if e.path is None and path is not None:
            raise MalformedDataError(str(e), path) from e
        raise
