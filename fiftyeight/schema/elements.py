"""
Form element models for the settings schema.

A schema is an ordered tree of immutable form elements. Leaf elements are
headings, paragraphs, toggles and submit buttons; sections group children
and may nest.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Iterable, Iterator, Optional


class SchemaError(ValueError):
    """Raised when a form element tree or raw schema document is invalid."""


@dataclass(frozen=True)
class FormElement:
    """Base class for all form elements."""

    type: ClassVar[str] = ""
    """Wire type tag understood by the rendering host."""


@dataclass(frozen=True)
class Heading(FormElement):
    """Bold page or section title."""

    type: ClassVar[str] = "heading"

    text: str


@dataclass(frozen=True)
class Paragraph(FormElement):
    """Descriptive paragraph."""

    type: ClassVar[str] = "text"

    text: str


@dataclass(frozen=True)
class Toggle(FormElement):
    """
    Labeled on/off switch bound to a persistence key.
    """

    type: ClassVar[str] = "toggle"

    key: str
    """Persistence key used in the submitted settings mapping."""

    label: str
    """Label shown next to the switch."""

    default_value: bool = False
    """Value used when nothing has been persisted yet."""

    description: str = ""
    """Help text rendered below the label."""


@dataclass(frozen=True)
class SubmitButton(FormElement):
    """Submit control that emits the current key/value mapping."""

    type: ClassVar[str] = "submit"

    label: str


@dataclass(frozen=True)
class Section(FormElement):
    """Visual grouping of child elements."""

    type: ClassVar[str] = "section"

    children: tuple[FormElement, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))

    @property
    def heading(self) -> Optional[Heading]:
        """Return the first child heading, if the section has one."""
        for child in self.children:
            if isinstance(child, Heading):
                return child
        return None


ELEMENT_TYPES: dict[str, type[FormElement]] = {
    cls.type: cls for cls in (Heading, Paragraph, Section, Toggle, SubmitButton)
}


def iter_elements(elements: Iterable[FormElement]) -> Iterator[FormElement]:
    """
    Walk an element tree depth-first in display order.

    Sections are yielded before their children.
    """
    for element in elements:
        yield element
        if isinstance(element, Section):
            yield from iter_elements(element.children)


def validate_elements(elements: Iterable[FormElement]) -> None:
    """
    Validate an element tree.

    Raises:
        SchemaError: On unknown element objects, empty toggle keys,
            non-boolean toggle defaults or duplicate toggle keys.
    """
    seen: set[str] = set()
    for element in iter_elements(elements):
        if not isinstance(element, tuple(ELEMENT_TYPES.values())):
            raise SchemaError(f"Unsupported form element: {element!r}")
        if not isinstance(element, Toggle):
            continue
        if not isinstance(element.key, str) or not element.key.strip():
            raise SchemaError(f"Toggle '{element.label}' must have a non-empty key")
        if not isinstance(element.default_value, bool):
            raise SchemaError(
                f"Toggle '{element.key}' default must be a boolean, "
                f"got {type(element.default_value).__name__}"
            )
        if element.key in seen:
            raise SchemaError(f"Duplicate toggle key: {element.key}")
        seen.add(element.key)


@dataclass(frozen=True)
class SettingsSchema:
    """
    Complete, ordered declaration of a settings form.

    Construction validates the tree, so a ``SettingsSchema`` always has
    unique toggle keys and boolean defaults.
    """

    elements: tuple[FormElement, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))
        validate_elements(self.elements)

    def __iter__(self) -> Iterator[FormElement]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __getitem__(self, index: int) -> FormElement:
        return self.elements[index]

    def walk(self) -> Iterator[FormElement]:
        """Iterate over every element, including section children."""
        return iter_elements(self.elements)

    def toggles(self) -> list[Toggle]:
        """Return all toggles in display order."""
        return [element for element in self.walk() if isinstance(element, Toggle)]

    def keys(self) -> list[str]:
        """Return toggle persistence keys in display order."""
        return [toggle.key for toggle in self.toggles()]

    def find_toggle(self, key: str) -> Optional[Toggle]:
        """Return the toggle bound to ``key``, or None."""
        for toggle in self.toggles():
            if toggle.key == key:
                return toggle
        return None

    def defaults(self) -> dict[str, bool]:
        """Return the default settings mapping in display order."""
        return {toggle.key: toggle.default_value for toggle in self.toggles()}

    def submit_button(self) -> Optional[SubmitButton]:
        for element in self.walk():
            if isinstance(element, SubmitButton):
                return element
        return None
