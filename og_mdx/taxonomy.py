"""Open Graph type taxonomy and classification helpers."""

from __future__ import annotations

from typing import Callable, Dict, Mapping, Optional, Protocol, Sequence, Tuple

TYPES: Dict[str, Tuple[str, ...]] = {
    "activity": ("activity", "sport"),
    "business": ("bar", "company", "cafe", "hotel", "restaurant"),
    "group": ("cause", "sports_league", "sports_team"),
    "organization": ("band", "government", "non_profit", "school", "university"),
    "person": (
        "actor",
        "athlete",
        "author",
        "director",
        "musician",
        "politician",
        "public_figure",
    ),
    "place": ("city", "country", "landmark", "state_province"),
    "product": (
        "album",
        "book",
        "drink",
        "food",
        "game",
        "movie",
        "product",
        "song",
        "tv_show",
    ),
    "website": ("blog", "website"),
}


class Typed(Protocol):
    @property
    def type(self) -> Optional[str]: ...


def validate_taxonomy(table: Mapping[str, Sequence[str]]) -> None:
    """Raise ``ValueError`` if any type string is listed under more than one schema."""
    owners: Dict[str, str] = {}
    for schema, types in table.items():
        for type_ in types:
            if type_ in owners and owners[type_] != schema:
                raise ValueError(
                    f"Type {type_!r} is listed under both {owners[type_]!r} and {schema!r}"
                )
            owners[type_] = schema


validate_taxonomy(TYPES)

ALL_TYPES: Tuple[str, ...] = tuple(t for types in TYPES.values() for t in types)


def classify(
    type_: Optional[str], table: Mapping[str, Sequence[str]] = TYPES
) -> Optional[str]:
    """Return the first schema whose type set contains ``type_``, else ``None``."""
    for schema, types in table.items():
        if type_ in types:
            return schema
    return None


def is_type(result: Typed, type_: str) -> bool:
    return result.type == type_


def is_schema(
    result: Typed, schema: str, table: Mapping[str, Sequence[str]] = TYPES
) -> bool:
    """True when the result's type is ``schema`` itself or one of its member types."""
    if schema not in table:
        return False
    return result.type == schema or result.type in table[schema]


def _build_predicates() -> Dict[str, Callable[[Typed], bool]]:
    predicates: Dict[str, Callable[[Typed], bool]] = {}
    for type_ in ALL_TYPES:
        predicates[type_] = lambda result, t=type_: is_type(result, t)
    # Schema predicates replace type predicates sharing the same label.
    for schema in TYPES:
        predicates[schema] = lambda result, s=schema: is_schema(result, s)
    return predicates


PREDICATES: Dict[str, Callable[[Typed], bool]] = _build_predicates()
