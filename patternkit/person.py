"""A person assembled through separate address and job builder facets."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Person:
    """A person with address and employment details."""

    street_address: str = ""
    post_code: str = ""
    city: str = ""
    company_name: str = ""
    position: str = ""
    annual_income: int = 0

    @classmethod
    def create(cls) -> PersonBuilder:
        """Start building a new person."""
        return PersonBuilder()

    def __str__(self) -> str:
        return (
            f"street_address: {self.street_address}"
            f" post_code: {self.post_code}"
            f" city: {self.city}"
            f" company_name: {self.company_name}"
            f" position: {self.position}"
            f" annual_income: {self.annual_income}"
        )


class PersonBuilderBase:
    """Shared base of all facets; every facet edits the same person."""

    def __init__(self, person: Person) -> None:
        self.person = person

    def lives(self) -> PersonAddressBuilder:
        """Switch to the address facet."""
        return PersonAddressBuilder(self.person)

    def works(self) -> PersonJobBuilder:
        """Switch to the employment facet."""
        return PersonJobBuilder(self.person)

    def build(self) -> Person:
        """Return the person being built."""
        return self.person


class PersonBuilder(PersonBuilderBase):
    """Entry builder that owns a fresh person."""

    def __init__(self) -> None:
        super().__init__(Person())


class PersonAddressBuilder(PersonBuilderBase):
    """Facet for setting address details."""

    def at(self, street_address: str) -> PersonAddressBuilder:
        self.person.street_address = street_address
        return self

    def with_postcode(self, post_code: str) -> PersonAddressBuilder:
        self.person.post_code = post_code
        return self

    def in_(self, city: str) -> PersonAddressBuilder:
        self.person.city = city
        return self


class PersonJobBuilder(PersonBuilderBase):
    """Facet for setting employment details."""

    def at(self, company_name: str) -> PersonJobBuilder:
        self.person.company_name = company_name
        return self

    def as_a(self, position: str) -> PersonJobBuilder:
        self.person.position = position
        return self

    def earning(self, annual_income: float) -> PersonJobBuilder:
        """Set the annual income, truncated to a whole number."""
        self.person.annual_income = int(annual_income)
        return self