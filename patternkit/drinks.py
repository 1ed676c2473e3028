"""Hot drinks made through abstract and concrete factories."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable


class HotDrink(ABC):
    """A drink that can be prepared in a given volume."""

    @abstractmethod
    def prepare(self, volume: int) -> None:
        """Prepare the drink, describing the steps on standard output."""


class Tea(HotDrink):
    """A cup of tea."""

    def prepare(self, volume: int) -> None:
        print(f"Take tea bag, boil water, pour{volume}ml, add some lemon")


class Coffee(HotDrink):
    """A cup of coffee."""

    def prepare(self, volume: int) -> None:
        print(f"Grind some beans, boil water, pour {volume}ml, add cream, enjoy!")


class HotDrinkFactory(ABC):
    """Abstract factory producing unprepared hot drinks."""

    @abstractmethod
    def make(self) -> HotDrink:
        """Return a new, unprepared drink."""


class TeaFactory(HotDrinkFactory):
    """Factory producing tea."""

    def make(self) -> HotDrink:
        return Tea()


class CoffeeFactory(HotDrinkFactory):
    """Factory producing coffee."""

    def make(self) -> HotDrink:
        return Coffee()


class DrinkFactory:
    """Looks up a concrete factory by name and prepares a 200 ml drink."""

    def __init__(self) -> None:
        self.hot_factories: dict[str, HotDrinkFactory] = {
            "coffee": CoffeeFactory(),
            "tea": TeaFactory(),
        }

    def make_drink(self, name: str) -> HotDrink:
        """Make and prepare the named drink; unknown names raise KeyError."""
        try:
            factory = self.hot_factories[name]
        except KeyError:
            raise KeyError(f"unknown drink: {name!r}") from None
        drink = factory.make()
        drink.prepare(200)
        return drink


def _small_tea() -> HotDrink:
    tea = Tea()
    tea.prepare(50)
    return tea


class DrinkWithVolumeFactory:
    """Makes drinks through named callables that also fix the volume."""

    def __init__(self) -> None:
        self.factories: dict[str, Callable[[], HotDrink]] = {"tea": _small_tea}

    def make_drink(self, name: str) -> HotDrink:
        """Make and prepare the named drink; unknown names raise KeyError."""
        try:
            factory = self.factories[name]
        except KeyError:
            raise KeyError(f"unknown drink: {name!r}") from None
        return factory()


def make_drink(kind: str) -> HotDrink:
    """Make tea (200 ml) for ``"tea"`` and coffee (50 ml) for anything else."""
    drink: HotDrink
    if kind == "tea":
        drink = Tea()
        drink.prepare(200)
    else:
        drink = Coffee()
        drink.prepare(50)
    return drink