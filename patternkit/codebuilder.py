"""A fluent builder that assembles a class declaration and renders it as code."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ClassSpec:
    """A class declaration: a name and its fields as (field name, type) pairs."""

    name: str
    fields: list[tuple[str, str]] = field(default_factory=list)

    def __str__(self) -> str:
        body = "".join(f"  {type_} {name};\n" for name, type_ in self.fields)
        return f"class {self.name}\n{{\n{body}}};\n"


class CodeBuilder:
    """Builds a ClassSpec one field at a time; calls can be chained."""

    def __init__(self, class_name: str) -> None:
        self.spec = ClassSpec(class_name)

    def add_field(self, name: str, type_: str) -> CodeBuilder:
        """Append a field and return the builder for chaining."""
        self.spec.fields.append((name, type_))
        return self

    def __str__(self) -> str:
        return str(self.spec)