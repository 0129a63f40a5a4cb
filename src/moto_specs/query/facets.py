"""Facet extraction: the distinct values a filter dropdown can offer."""

from __future__ import annotations

from typing import Any, Iterable

from moto_specs.domain.motorcycle import MISSING, Motorcycle

FILTERABLE_ATTRIBUTES = ("brand", "type")


def extract_facet(dataset: Iterable[Motorcycle], attribute: str) -> tuple[Any, ...]:
    """
    Distinct values of one attribute across the whole dataset.

    Values keep first-seen order. Records without the attribute contribute
    nothing, so a facet never offers an empty option.
    """
    values: list[Any] = []
    for motorcycle in dataset:
        value = motorcycle.value_of(attribute)
        if value is MISSING or value in values:
            continue
        values.append(value)
    return tuple(values)


def extract_facets(
    dataset: Iterable[Motorcycle],
    attributes: Iterable[str] = FILTERABLE_ATTRIBUTES,
) -> dict[str, tuple[Any, ...]]:
    # Materialize once; the dataset may be a one-shot iterator
    motorcycles = tuple(dataset)
    return {attribute: extract_facet(motorcycles, attribute) for attribute in attributes}
