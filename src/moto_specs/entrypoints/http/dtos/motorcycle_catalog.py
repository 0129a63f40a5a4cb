from pydantic import BaseModel, ConfigDict, Field

from moto_specs.domain.motorcycle import SortOrder


class MotorcycleResponseDTO(BaseModel):
    name: str | None = None
    brand: str | None = None
    type: str | None = None
    year: int | None = None
    engine: str | None = None
    image: str | None = None


class MotorcyclesQueryDTO(BaseModel):
    """Query parameters for browsing the motorcycle catalog."""

    search: str = Field(
        default="",
        description="Case-insensitive substring of name or brand (empty matches all)",
        examples=["cbr"],
        max_length=200,
    )
    brand: str | None = Field(
        default=None,
        description="Filter by brand (case-sensitive exact match)",
        examples=["Honda"],
    )
    type: str | None = Field(
        default=None,
        description="Filter by type (case-sensitive exact match)",
        examples=["Sport"],
    )
    sort_key: str = Field(
        default="name",
        description="Field to sort by (name, brand, type, year, engine, or any source field)",
        examples=["year"],
        min_length=1,
        max_length=50,
        pattern=r"^[A-Za-z_][A-Za-z0-9_]*$",
    )
    sort_order: SortOrder = Field(
        default=SortOrder.ASC,
        description="Sort direction",
        examples=["desc"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "search": "cbr",
                "brand": "Honda",
                "type": "Sport",
                "sort_key": "year",
                "sort_order": "desc",
            }
        }
    )


class FacetsResponseDTO(BaseModel):
    brand: list[str]
    type: list[str]


class QueryEchoDTO(BaseModel):
    search: str
    brand: str | None = None
    type: str | None = None
    sort_key: str
    sort_order: SortOrder


class MotorcycleCatalogResponseDTO(BaseModel):
    motorcycles: list[MotorcycleResponseDTO]
    total: int
    facets: FacetsResponseDTO
    query: QueryEchoDTO


class RefreshResponseDTO(BaseModel):
    loaded: bool
    count: int
    error: str | None = None
