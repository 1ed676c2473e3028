# patternkit

Compact, working examples of the creational design patterns: fluent
builders, a builder with separate facets, nested tag construction, and
simple, counting and abstract factories. The package has no dependencies
beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
patternkit html points
```

`patternkit` runs the demonstrations it is given by name, in the order
given, and runs all of them when none is named. The names are:

- `codebuilder` – prints a generated class skeleton
- `html` – prints hand-built list markup and then the same list made by `HtmlBuilder`
- `facets` – prints a person assembled through builder facets
- `tags` – prints a nested tag tree
- `drinks` – makes a coffee and prints how it is prepared
- `points` – prints a point made from polar coordinates

An unknown name is rejected with a usage message.

## Builders

### Code builder

`patternkit.codebuilder.CodeBuilder` collects fields into a `ClassSpec`;
`add_field(name, type_)` returns the builder, so calls chain.

```python
from patternkit.codebuilder import CodeBuilder

cb = CodeBuilder("Person").add_field("name", "string").add_field("age", "int")
print(cb)
```

```
class Person
{
  string name;
  int age;
};
```

### HTML builder

```python
from patternkit.html import HtmlBuilder, HtmlElement

builder = HtmlBuilder("ul")
builder.add_child("li", "hello").add_child("li", "world")
print(builder)

element = HtmlElement.create("ul").add_child("li", "item").build()
print(element.render(1))  # indented one level deeper
```

```
<ul>
  <li>
    hello
  </li>
  <li>
    world
  </li>
</ul>
```

Each tag and each text is printed on its own line, with two spaces of
indentation per nesting level. `build()` returns a copy of the element, so
later changes through the builder do not affect it.

### Builder facets

A `Person` has an address part and an employment part; each has its own
builder (`PersonAddressBuilder`, `PersonJobBuilder`), and you can switch
between them mid-chain with `lives()` and `works()`. All facets edit the
same person, which `build()` returns.

```python
from patternkit.person import Person

person = (
    Person.create()
    .lives().at("123 London Road").with_postcode("SW1 1GB").in_("London")
    .works().at("PragmaSoft").as_a("Consultant").earning(10_000_000)
    .build()
)
print(person)
```

```
street_address: 123 London Road post_code: SW1 1GB city: London company_name: PragmaSoft position: Consultant annual_income: 10000000
```

`earning()` stores the income as a whole number, truncating any fraction.

### Nested tags

`Tag(name, text="", children=None)` renders itself with its attributes and
children; a tag with neither text nor children is self-closing.
`Paragraph(*children, text="")` is a `p` tag and `Image(url)` an `img` tag
with a `src` attribute.

```python
from patternkit.tags import Image, Paragraph

print(Paragraph(Image("https://example.com/pikachu.png")))
```

```
<p>
<img src="https://example.com/pikachu.png"/>
</p>
```

## Factories

### Factory methods

`Point` is a frozen dataclass; `PointFactory` makes points from Cartesian
or polar coordinates.

```python
import math
from patternkit.points import PointFactory

print(PointFactory.new_cartesian(1, 2))        # x: 1 y: 2
print(PointFactory.new_polar(5, math.pi / 4))
```

### A counting factory

```python
from patternkit.personfactory import PersonFactory

factory = PersonFactory()
first = factory.create_person("Chris")   # id 0
second = factory.create_person("Alex")   # id 1
```

Each factory numbers its people from zero on its own.

### Abstract factory

`HotDrinkFactory` is the abstract factory; `TeaFactory` and `CoffeeFactory`
make unprepared `Tea` and `Coffee` drinks.

```python
from patternkit.drinks import DrinkFactory, DrinkWithVolumeFactory, make_drink

coffee = DrinkFactory().make_drink("coffee")        # prepared with 200 ml
tea = DrinkWithVolumeFactory().make_drink("tea")    # prepared with 50 ml
other = make_drink("tea")                           # tea with 200 ml
```

- `DrinkFactory` knows `"coffee"` and `"tea"` and prepares 200 ml.
- `DrinkWithVolumeFactory` knows only `"tea"`, prepared with 50 ml.
- Both raise `KeyError` for a name they do not know.
- `make_drink(kind)` makes tea with 200 ml for `"tea"` and coffee with 50 ml
  for anything else.

Every drink prints how it is prepared when it is made.