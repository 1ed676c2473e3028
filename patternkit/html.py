"""A builder for simple indented HTML element trees."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

INDENT_SIZE = 2


@dataclass
class HtmlElement:
    """An HTML element with optional text and nested child elements."""

    name: str = ""
    text: str = ""
    elements: list[HtmlElement] = field(default_factory=list)

    def render(self, indent: int = 0) -> str:
        """Render the element and its children, one tag per line."""
        pad = " " * (INDENT_SIZE * indent)
        parts = [f"{pad}<{self.name}>\n"]
        if self.text:
            parts.append(" " * (INDENT_SIZE * (indent + 1)) + self.text + "\n")
        parts.extend(child.render(indent + 1) for child in self.elements)
        parts.append(f"{pad}</{self.name}>\n")
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()

    @classmethod
    def create(cls, root_name: str) -> HtmlBuilder:
        """Start building an element tree rooted at ``root_name``."""
        return HtmlBuilder(root_name)


class HtmlBuilder:
    """Fluent builder adding child elements under a root element."""

    def __init__(self, root_name: str) -> None:
        self.root = HtmlElement(root_name)

    def add_child(self, child_name: str, child_text: str) -> HtmlBuilder:
        """Append a child element and return the builder for chaining."""
        self.root.elements.append(HtmlElement(child_name, child_text))
        return self

    def build(self) -> HtmlElement:
        """Return a copy of the element built so far."""
        return copy.deepcopy(self.root)

    def __str__(self) -> str:
        return self.root.render()