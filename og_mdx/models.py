"""Data models returned by the extraction pipeline."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Dict, Iterator, Mapping as MappingType, Optional

from .config import MANDATORY_ATTRIBUTES
from .taxonomy import classify, is_schema, is_type


def has_mandatory_attributes(attributes: MappingType[str, Optional[str]]) -> bool:
    """Check that every mandatory Open Graph attribute has a value."""
    return all(attributes.get(name) is not None for name in MANDATORY_ATTRIBUTES)


class OpenGraphObject(Mapping):
    """Read-only view over the Open Graph attributes detected on a page.

    Attribute names are the ``og:`` property suffixes with hyphens turned
    into underscores, e.g. ``og:site-name`` is stored as ``site_name``.
    """

    def __init__(self, attributes: MappingType[str, str]) -> None:
        self._attributes: Dict[str, str] = dict(attributes)

    def __getitem__(self, key: str) -> str:
        return self._attributes[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._attributes!r})"

    @property
    def type(self) -> Optional[str]:
        """The declared ``og:type``."""
        return self._attributes.get("type")

    @property
    def schema(self) -> Optional[str]:
        """The taxonomy schema this object's type belongs to, if any."""
        return classify(self.type)

    @property
    def valid(self) -> bool:
        """False when any of title, type, image or url is missing."""
        return has_mandatory_attributes(self._attributes)

    def is_type(self, type_: str) -> bool:
        return is_type(self, type_)

    def is_schema(self, schema: str) -> bool:
        return is_schema(self, schema)

    def to_dict(self) -> Dict[str, str]:
        return dict(self._attributes)
