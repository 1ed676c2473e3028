"""A factory that hands out people with consecutive identifiers."""

from __future__ import annotations

import itertools
from dataclasses import dataclass


@dataclass(frozen=True)
class Person:
    """A person with a numeric identifier and a name."""

    id: int
    name: str


class PersonFactory:
    """Creates people, numbering them from zero in order of creation."""

    def __init__(self) -> None:
        self._ids = itertools.count()

    def create_person(self, name: str) -> Person:
        return Person(next(self._ids), name)