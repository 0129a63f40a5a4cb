from __future__ import annotations

from typing import Any

from moto_specs.domain.motorcycle import FilterSelection, Motorcycle, QueryState, SortSpec
from moto_specs.entrypoints.http.dtos.motorcycle_catalog import (
    FacetsResponseDTO,
    MotorcycleCatalogResponseDTO,
    MotorcycleResponseDTO,
    MotorcyclesQueryDTO,
    QueryEchoDTO,
    RefreshResponseDTO,
)
from moto_specs.use_cases.browse_motorcycle_catalog import (
    BrowseMotorcycleCatalogRequest,
    BrowseMotorcycleCatalogResponse,
)
from moto_specs.use_cases.refresh_motorcycle_catalog import RefreshMotorcycleCatalogResponse


class MotorcycleCatalogMapper:
    """Maps between REST DTOs and domain models for the motorcycle catalog."""

    @staticmethod
    def to_domain_query(dto: MotorcyclesQueryDTO) -> QueryState:
        """
        Converts query params to the domain query state.

        Empty strings for brand/type mean "no constraint", same as omitting them.

        Args:
            dto: The data transfer object containing query parameters

        Returns:
            QueryState: Immutable search + filters + sort
        """
        return QueryState(
            search=dto.search,
            filters=FilterSelection(brand=dto.brand or None, type=dto.type or None),
            sort=SortSpec(key=dto.sort_key, order=dto.sort_order),
        )

    @staticmethod
    def to_domain_request(dto: MotorcyclesQueryDTO) -> BrowseMotorcycleCatalogRequest:
        return BrowseMotorcycleCatalogRequest(query=MotorcycleCatalogMapper.to_domain_query(dto))

    @staticmethod
    def to_motorcycle_response(motorcycle: Motorcycle) -> MotorcycleResponseDTO:
        return MotorcycleResponseDTO(
            name=motorcycle.name,
            brand=motorcycle.brand,
            type=motorcycle.type,
            year=motorcycle.year,
            engine=motorcycle.engine,
            image=motorcycle.image,
        )

    @staticmethod
    def to_facets_response(facets: dict[str, tuple[Any, ...]]) -> FacetsResponseDTO:
        """
        Converts extracted facets to the REST shape.

        Args:
            facets: Facet values keyed by attribute name

        Returns:
            FacetsResponseDTO: Option lists for the brand and type filters
        """
        return FacetsResponseDTO(
            brand=[str(value) for value in facets.get("brand", ())],
            type=[str(value) for value in facets.get("type", ())],
        )

    @staticmethod
    def to_response(
        result: BrowseMotorcycleCatalogResponse,
        query: QueryState,
    ) -> MotorcycleCatalogResponseDTO:
        """
        Converts the browse result to the REST response, echoing the applied query.

        Args:
            result: Domain result containing the view and facets
            query: The query state that produced it

        Returns:
            MotorcycleCatalogResponseDTO: Motorcycles, facets and query echo
        """
        return MotorcycleCatalogResponseDTO(
            motorcycles=[
                MotorcycleCatalogMapper.to_motorcycle_response(motorcycle)
                for motorcycle in result.motorcycles
            ],
            total=result.total_count,
            facets=MotorcycleCatalogMapper.to_facets_response(result.facets),
            query=QueryEchoDTO(
                search=query.search,
                brand=query.filters.brand,
                type=query.filters.type,
                sort_key=query.sort.key,
                sort_order=query.sort.order,
            ),
        )

    @staticmethod
    def to_refresh_response(result: RefreshMotorcycleCatalogResponse) -> RefreshResponseDTO:
        return RefreshResponseDTO(loaded=result.loaded, count=result.count, error=result.error)
