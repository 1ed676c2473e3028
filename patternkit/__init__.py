"""Builder and factory design patterns: fluent builders, facets, tags and factories."""

__version__ = "0.1.0"