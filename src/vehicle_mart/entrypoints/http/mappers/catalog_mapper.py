from __future__ import annotations

from vehicle_mart.domain.vehicle import SearchQuery, SortKey
from vehicle_mart.entrypoints.http.dtos.catalog import (
    CatalogNoticeDTO,
    CatalogResponseDTO,
    VehicleCardDTO,
    VehicleSearchQueryDTO,
)
from vehicle_mart.use_cases.browse_catalog import BrowseCatalogRequest
from vehicle_mart.use_cases.present_vehicles import CatalogView, VehicleCard


class CatalogMapper:
    """Maps between REST DTOs and domain models for catalog browsing."""

    @staticmethod
    def to_search_query(dto: VehicleSearchQueryDTO) -> SearchQuery:
        """
        Converts query params to a domain search query.

        Blank parameters become None ("no constraint") inside SearchQuery.

        Args:
            dto: The data transfer object containing search query parameters

        Returns:
            SearchQuery: Domain search query
        """
        return SearchQuery(
            make=dto.make,
            model=dto.model,
            year=dto.year,
            engine_size=dto.enginesize,  # DTO uses 'enginesize', domain uses 'engine_size'
        )

    @staticmethod
    def to_sort_key(dto: VehicleSearchQueryDTO) -> SortKey | None:
        """Unrecognized sort values map to None (source order), never to an error."""
        return SortKey.parse(dto.sort)

    @staticmethod
    def to_domain_request(dto: VehicleSearchQueryDTO) -> BrowseCatalogRequest:
        return BrowseCatalogRequest(
            query=CatalogMapper.to_search_query(dto),
            sort_key=CatalogMapper.to_sort_key(dto),
        )

    @staticmethod
    def to_card_response(card: VehicleCard) -> VehicleCardDTO:
        return VehicleCardDTO(
            id=card.id,
            image_src=card.image_src,
            fallback_image_src=card.fallback_image_src,
            image_alt=card.image_alt,
            price=card.price,
            heading=card.heading,
            summary=card.summary,
            model_code=card.model_code,
            engine=card.engine,
            detail_href=card.detail_href,
        )

    @staticmethod
    def to_response(view: CatalogView) -> CatalogResponseDTO:
        """
        Converts a rendered catalog view to the REST response.

        Args:
            view: Cards or a single notice

        Returns:
            CatalogResponseDTO: cards, optional notice and card count
        """
        notice = None
        if view.notice is not None:
            notice = CatalogNoticeDTO(message=view.notice.message, tone=view.notice.tone)

        return CatalogResponseDTO(
            cards=[CatalogMapper.to_card_response(card) for card in view.cards],
            notice=notice,
            total=len(view.cards),
        )
