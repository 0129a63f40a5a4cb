"""Stable comparator sorting by an arbitrary record field."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable

from moto_specs.domain.motorcycle import MISSING, Motorcycle, SortOrder, SortSpec

# Type groups keep mixed-type keys totally ordered
_NUMBER = 0
_TEXT = 1
_OTHER = 2


def sort_motorcycles(items: Iterable[Motorcycle], sort: SortSpec) -> tuple[Motorcycle, ...]:
    """
    Order motorcycles by ``sort.key`` in ``sort.order``.

    Ordering rules:
    - Text compares lower-cased; numbers compare natively
    - Equal keys keep their input order in both directions
    - Records missing the key go last, in input order, whatever the direction
    """
    present: list[Motorcycle] = []
    missing: list[Motorcycle] = []
    for motorcycle in items:
        if motorcycle.value_of(sort.key) is MISSING:
            missing.append(motorcycle)
        else:
            present.append(motorcycle)

    # sorted() keeps ties in input order even with reverse=True
    ordered = sorted(
        present,
        key=lambda motorcycle: comparison_key(motorcycle.value_of(sort.key)),
        reverse=sort.order is SortOrder.DESC,
    )
    return tuple(ordered) + tuple(missing)


def comparison_key(value: Any) -> tuple[int, Any]:
    if isinstance(value, str):
        return (_TEXT, value.lower())
    if isinstance(value, (int, float, Decimal)):
        return (_NUMBER, value)
    return (_OTHER, repr(value))
