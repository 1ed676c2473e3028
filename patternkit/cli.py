"""Command that runs the pattern demonstrations."""

from __future__ import annotations

import argparse
import math
from collections.abc import Callable, Sequence

from patternkit.codebuilder import CodeBuilder
from patternkit.drinks import DrinkFactory
from patternkit.html import HtmlBuilder, HtmlElement
from patternkit.person import Person
from patternkit.points import PointFactory
from patternkit.tags import Image, Paragraph

_SEPARATOR = "/" * 45


def _demo_codebuilder() -> None:
    cb = CodeBuilder("Person").add_field("name", "string").add_field("age", "int")
    print(cb, end="")


def _demo_html() -> None:
    print(_SEPARATOR)
    text = "Hello"
    print(f"<p>{text}<p>")
    words = ["hello", "world"]
    items = "".join(f"<li>{word}</li>" for word in words)
    print(f"<ul>{items}</ul>")
    print(_SEPARATOR)

    builder = HtmlBuilder("ul")
    builder.add_child("li", "hello").add_child("li", "world")
    print(builder)

    HtmlElement.create("ul").add_child("", "").build()


def _demo_facets() -> None:
    person = (
        Person.create()
        .lives().at("123 London Road").with_postcode("SW1 1GB").in_("London")
        .works().at("PragmaSoft").as_a("Consultant").earning(10e6)
        .build()
    )
    print(person)


def _demo_tags() -> None:
    print(Paragraph(Image("http://example.com/pikachu.png")))


def _demo_drinks() -> None:
    DrinkFactory().make_drink("coffee")


def _demo_points() -> None:
    print(PointFactory.new_polar(5, math.pi / 4))


DEMOS: dict[str, Callable[[], None]] = {
    "codebuilder": _demo_codebuilder,
    "html": _demo_html,
    "facets": _demo_facets,
    "tags": _demo_tags,
    "drinks": _demo_drinks,
    "points": _demo_points,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the named demonstrations, or all of them when none is named."""
    parser = argparse.ArgumentParser(
        prog="patternkit", description="Run builder and factory demonstrations."
    )
    parser.add_argument("demos", nargs="*", choices=[*DEMOS, []] and list(DEMOS),
                        metavar="DEMO", help=f"one of: {', '.join(DEMOS)}")
    args = parser.parse_args(argv)
    for name in args.demos or DEMOS:
        DEMOS[name]()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())