from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Mapping

from moto_specs.domain.errors import QueryValidationError


class _Missing:
    """Marker for a field that is absent (or null) on a record."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()

MOTORCYCLE_FIELDS = ("name", "brand", "type", "year", "engine", "image")


@dataclass(frozen=True, slots=True)
class Motorcycle:
    name: str | None = None
    brand: str | None = None
    type: str | None = None
    year: int | None = None
    engine: str | None = None
    image: str | None = None
    # Any other attributes the source sent along; sortable but never filtered
    extras: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def value_of(self, key: str) -> Any:
        """
        Look up a field by name.

        Returns:
            The stored value, or MISSING when the field is absent or None
        """
        if key in MOTORCYCLE_FIELDS:
            value = getattr(self, key)
        else:
            value = self.extras.get(key)
        return MISSING if value is None else value


Dataset = tuple[Motorcycle, ...]


@dataclass(frozen=True, slots=True)
class FilterSelection:
    """Categorical constraints; None or "" means no constraint on that attribute."""

    brand: str | None = None
    type: str | None = None

    def active(self) -> dict[str, str]:
        """Only the constraints that actually narrow the dataset."""
        return {
            attribute: value
            for attribute, value in (("brand", self.brand), ("type", self.type))
            if value
        }


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def toggled(self) -> SortOrder:
        return SortOrder.DESC if self is SortOrder.ASC else SortOrder.ASC


@dataclass(frozen=True, slots=True)
class SortSpec:
    key: str = "name"
    order: SortOrder = SortOrder.ASC


@dataclass(frozen=True, slots=True)
class QueryState:
    """
    Everything the user controls about the current view.

    One immutable value instead of independent search/filter/sort cells,
    so the query engine can stay a pure function of (dataset, state).
    """

    search: str = ""
    filters: FilterSelection = field(default_factory=FilterSelection)
    sort: SortSpec = field(default_factory=SortSpec)

    def with_search(self, search: str) -> QueryState:
        return replace(self, search=search)

    def with_filter(self, attribute: str, value: str | None) -> QueryState:
        if attribute not in ("brand", "type"):
            raise QueryValidationError(
                errors=[
                    {
                        "field": attribute,
                        "message": "Only 'brand' and 'type' can be filtered",
                        "code": "UNKNOWN_FILTER",
                    }
                ]
            )
        return replace(self, filters=replace(self.filters, **{attribute: value}))

    def with_sort_key(self, key: str) -> QueryState:
        return replace(self, sort=replace(self.sort, key=key))

    def with_order_toggled(self) -> QueryState:
        return replace(self, sort=replace(self.sort, order=self.sort.order.toggled()))

    def validate(self) -> None:
        """
        Validate query parameters.

        Raises:
            QueryValidationError: If the state cannot be executed
        """
        errors: list[dict[str, str]] = []

        if not isinstance(self.search, str):
            errors.append(
                {"field": "search", "message": "Must be text", "code": "INVALID_TYPE"}
            )
        if not isinstance(self.sort.key, str) or not self.sort.key.strip():
            errors.append(
                {"field": "sort_key", "message": "Must not be empty", "code": "REQUIRED"}
            )
        if not isinstance(self.sort.order, SortOrder):
            errors.append(
                {
                    "field": "sort_order",
                    "message": "Must be 'asc' or 'desc'",
                    "code": "INVALID_CHOICE",
                }
            )

        if errors:
            raise QueryValidationError(errors=errors)
