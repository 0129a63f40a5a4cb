"""Query engine: the composition of filtering and sorting over a dataset snapshot."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from moto_specs.domain.motorcycle import Dataset, Motorcycle, QueryState
from moto_specs.query.facets import extract_facets
from moto_specs.query.filtering import filter_motorcycles
from moto_specs.query.sorting import sort_motorcycles

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CatalogPage:
    """A view plus the facet options that go with it."""

    motorcycles: tuple[Motorcycle, ...]
    facets: dict[str, tuple[Any, ...]]
    total_count: int


def run_query(dataset: Dataset, state: QueryState) -> tuple[Motorcycle, ...]:
    """
    Produce the view for one query state.

    Pure: the dataset is never mutated and nothing is cached between calls.
    """
    filtered = filter_motorcycles(dataset, state.filters, state.search)
    view = sort_motorcycles(filtered, state.sort)

    logger.debug(
        "Query executed",
        extra={
            "dataset_size": len(dataset),
            "view_size": len(view),
            "sort_key": state.sort.key,
            "sort_order": state.sort.order.value,
        },
    )
    return view


def build_catalog_page(dataset: Dataset, state: QueryState) -> CatalogPage:
    """Run the query and attach facets taken from the full dataset, not the view."""
    view = run_query(dataset, state)
    return CatalogPage(
        motorcycles=view,
        facets=extract_facets(dataset),
        total_count=len(view),
    )
