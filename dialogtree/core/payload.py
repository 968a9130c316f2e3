"""
Payload base class for values stored in a dialog tree.

Payloads are pure value objects: the text of a dialog line, the label on
the choice that leads into a branch. Using Pydantic gives them:
- Value equality
- Validation on load
- JSON serialization
- Deep copies via clone()

The tree itself does not require Payload subclasses. Any value that
pydantic can (de)serialize through a TypeAdapter and that copy.deepcopy
can duplicate works as a line or entry type.

Usage:
    @register_payload
    class Choice(Payload):
        text: str
        mood: str = "neutral"

    branch = Branch(entry=Choice(text="Run away"), lines=[...])
"""

from __future__ import annotations

import copy
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict

from dialogtree.core.errors import ValidationError

T = TypeVar('T')


class Payload(BaseModel):
    """
    Base class for dialog payload values.

    Payloads are immutable once created; build a new one (or use
    model_copy(update=...)) to change a field.
    """

    model_config = ConfigDict(
        frozen=True,
        extra='forbid',
    )

    # Name used by the payload registry
    _type_name: ClassVar[str] = ""

    @classmethod
    def get_type_name(cls) -> str:
        """Get the payload type name used for lookups."""
        return cls._type_name or cls.__name__

    def clone(self) -> Payload:
        """Create a deep copy of this payload."""
        return self.model_copy(deep=True)

    def display_text(self) -> str:
        """Text shown to a player for this value."""
        return str(self)


# Registry of payload types, looked up by name from the command line
_payload_registry: dict[str, type] = {}


def register_payload(cls: type[T]) -> type[T]:
    """
    Decorator to register a payload type.

    Usage:
        @register_payload
        class Emote(Payload):
            actor: str
            animation: str
    """
    type_name = getattr(cls, 'get_type_name', lambda: cls.__name__)()
    _payload_registry[type_name] = cls
    return cls


def get_payload_type(type_name: str) -> type | None:
    """Get payload class by type name."""
    return _payload_registry.get(type_name)


def get_all_payload_types() -> dict[str, type]:
    """Get all registered payload types."""
    return _payload_registry.copy()


@register_payload
class DialogLine(Payload):
    """
    One line of dialog.

    Attributes:
        id: Speaker identifier ("Npc", "Player", ...)
        content: What the speaker says
    """
    id: str = ""
    content: str = ""

    def display_text(self) -> str:
        return self.content

    def __str__(self) -> str:
        return f'{self.id}: {self.content}'


@register_payload
class EntryLabel(Payload):
    """Label of the choice that leads into a branch."""
    text: str = ""

    def display_text(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


def clone_value(value: T) -> T:
    """
    Copy a payload value for insertion into another tree.

    Values with a clone() method (Payloads) copy themselves; anything
    else goes through copy.deepcopy.
    """
    if value is None:
        return None
    clone = getattr(value, 'clone', None)
    if callable(clone):
        return clone()
    return copy.deepcopy(value)


def display_text(value: Any) -> str:
    """Player-facing text for a line or entry value."""
    if value is None:
        return ""
    if isinstance(value, Payload):
        return value.display_text()
    for attr in ('text', 'content'):
        text = getattr(value, attr, None)
        if isinstance(text, str):
            return text
    return str(value)


def coerce_line(line: Any, line_factory: Any = DialogLine) -> Any:
    """
    Copy a line value for insertion, building it from a tuple if needed.

    A (speaker, text) tuple is passed to line_factory(id=..., content=...).
    With line_factory=None tuples are kept as line values like anything
    else.

    Raises:
        ValidationError: If a tuple is not exactly two strings
    """
    if line_factory is None or not isinstance(line, tuple):
        return clone_value(line)
    if len(line) != 2 or not all(isinstance(part, str) for part in line):
        raise ValidationError(f"Line tuple must be (speaker, text), got {line!r}")
    return line_factory(id=line[0], content=line[1])
