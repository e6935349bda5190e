from pydantic import BaseModel, ConfigDict, Field


class VehicleCardDTO(BaseModel):
    """Display card. All text fields are HTML-escaped."""

    model_config = ConfigDict(protected_namespaces=())

    id: str
    image_src: str
    fallback_image_src: str
    image_alt: str
    price: str
    heading: str
    summary: str
    model_code: str
    engine: str
    detail_href: str


class CatalogNoticeDTO(BaseModel):
    message: str
    tone: str


class VehicleSearchQueryDTO(BaseModel):
    """Query parameters for browsing the catalog."""

    make: str | None = Field(
        default=None,
        description="Filter by make (case-insensitive partial match)",
        examples=["toyota"],
    )
    model: str | None = Field(
        default=None,
        description="Filter by model (case-insensitive partial match)",
        examples=["cor"],
    )
    year: str | None = Field(
        default=None,
        description="Filter by year (exact match)",
        examples=["2020"],
    )
    enginesize: str | None = Field(
        default=None,
        description="Filter by engine size: 1800 (cc) or 1.8 (liters), otherwise partial text match",
        examples=["1800"],
    )
    sort: str | None = Field(
        default=None,
        description="Sort key: price (ascending), date or year (newest first). Anything else keeps source order",
        examples=["price"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "make": "Toyota",
                "model": "Corolla",
                "year": "2020",
                "enginesize": "1.8",
                "sort": "price",
            }
        }
    )


class CatalogResponseDTO(BaseModel):
    cards: list[VehicleCardDTO]
    notice: CatalogNoticeDTO | None = None
    total: int
