"""Logical fields produced by the extractor and consumed by the serializer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Single:
    """A field rendered as exactly one element, even when the value is empty."""

    name: str
    value: str


@dataclass(frozen=True)
class Many:
    """A field rendered as one element per value, in order."""

    name: str
    values: tuple[str, ...]


Field = Single | Many
