from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from moto_specs.domain.motorcycle import Motorcycle, QueryState
from moto_specs.infra.dataset_store import DatasetStore
from moto_specs.query.engine import build_catalog_page
from moto_specs.query.facets import extract_facets


@dataclass(frozen=True, slots=True)
class BrowseMotorcycleCatalogRequest:
    query: QueryState = field(default_factory=QueryState)


@dataclass(frozen=True, slots=True)
class BrowseMotorcycleCatalogResponse:
    motorcycles: tuple[Motorcycle, ...]
    facets: dict[str, tuple[Any, ...]]
    total_count: int


class BrowseMotorcycleCatalog:
    """
    Search, filter and sort the loaded motorcycle catalog.

    This use case validates the query state, takes the current dataset
    snapshot and hands both to the query engine. No filtering or sorting
    logic lives here.
    """

    def __init__(self, dataset_store: DatasetStore) -> None:
        self._dataset_store = dataset_store

    def execute(self, request: BrowseMotorcycleCatalogRequest) -> BrowseMotorcycleCatalogResponse:
        """
        Execute catalog browsing.

        Args:
            request: Query state (search, filters, sort)

        Returns:
            Response containing the ordered view and the facet options

        Raises:
            QueryValidationError: If the query state is invalid
            DataSourceUnavailableError: If the dataset could not be fetched
            DatasetNotLoadedError: If the dataset has not been loaded yet
        """
        # Validate before touching the store so bad input fails fast
        request.query.validate()

        dataset = self._dataset_store.snapshot()
        page = build_catalog_page(dataset, request.query)

        return BrowseMotorcycleCatalogResponse(
            motorcycles=page.motorcycles,
            facets=page.facets,
            total_count=page.total_count,
        )

    def facets(self) -> dict[str, tuple[Any, ...]]:
        """
        Filter options across the whole catalog, without running a query.

        Raises:
            DataSourceUnavailableError: If the dataset could not be fetched
            DatasetNotLoadedError: If the dataset has not been loaded yet
        """
        return extract_facets(self._dataset_store.snapshot())
