"""Predicate filtering over an in-memory dataset."""

from __future__ import annotations

from typing import Iterable

from moto_specs.domain.motorcycle import FilterSelection, Motorcycle


def filter_motorcycles(
    dataset: Iterable[Motorcycle],
    filters: FilterSelection,
    search: str = "",
) -> tuple[Motorcycle, ...]:
    """
    Keep the motorcycles that satisfy every active constraint.

    - brand/type: exact, case-sensitive equality with the stored value
    - search: case-insensitive substring of name OR brand
    - all groups are ANDed; dataset order is preserved

    A record missing a field simply fails the predicate that reads it.
    """
    constraints = filters.active()
    needle = search.lower()

    return tuple(
        motorcycle
        for motorcycle in dataset
        if _matches_filters(motorcycle, constraints) and _matches_search(motorcycle, needle)
    )


def _matches_filters(motorcycle: Motorcycle, constraints: dict[str, str]) -> bool:
    for attribute, expected in constraints.items():
        if motorcycle.value_of(attribute) != expected:
            return False
    return True


def _matches_search(motorcycle: Motorcycle, needle: str) -> bool:
    if not needle:
        return True
    return _contains(motorcycle.name, needle) or _contains(motorcycle.brand, needle)


def _contains(value: object, needle: str) -> bool:
    return isinstance(value, str) and needle in value.lower()
