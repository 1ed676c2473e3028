"""Nested markup tags built declaratively through constructors."""

from __future__ import annotations

from collections.abc import Iterable


class Tag:
    """A markup tag with optional text, attributes and child tags."""

    def __init__(self, name: str, text: str = "", children: Iterable[Tag] | None = None) -> None:
        self.name = name
        self.text = text
        self.children: list[Tag] = list(children) if children is not None else []
        self.attributes: list[tuple[str, str]] = []

    def __str__(self) -> str:
        attrs = "".join(f' {key}="{value}"' for key, value in self.attributes)
        if not self.children and not self.text:
            return f"<{self.name}{attrs}/>\n"
        parts = [f"<{self.name}{attrs}>\n"]
        if self.text:
            parts.append(self.text + "\n")
        parts.extend(str(child) for child in self.children)
        parts.append(f"</{self.name}>\n")
        return "".join(parts)


class Paragraph(Tag):
    """A ``p`` tag holding either text or child tags."""

    def __init__(self, *args: Tag, text: str = "") -> None:
        super().__init__("p", text, args)


class Image(Tag):
    """A self-closing ``img`` tag with a ``src`` attribute."""

    def __init__(self, url: str) -> None:
        super().__init__("img")
        self.attributes.append(("src", url))