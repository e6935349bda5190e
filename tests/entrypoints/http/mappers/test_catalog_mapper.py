"""
Test suite for CatalogMapper.

- Converts query params to the domain search query and sort key
- Converts rendered views to the REST response
- No business logic, just translation
"""

from __future__ import annotations

from vehicle_mart.domain.vehicle import SearchQuery, SortKey
from vehicle_mart.entrypoints.http.dtos.catalog import CatalogResponseDTO, VehicleSearchQueryDTO
from vehicle_mart.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from vehicle_mart.use_cases.present_vehicles import CatalogNotice, CatalogView, VehicleCard


def _card(card_id: str) -> VehicleCard:
    return VehicleCard(
        id=card_id,
        image_src="images/a.jpg",
        image_alt="Toyota Corolla",
        price="$15,000",
        heading="Toyota Corolla",
        summary="2020 — 1800cc — Automatic — Silver",
        model_code="ZRE172",
        engine="1800cc",
        detail_href=f"vehicle.html?id={card_id}",
    )


# ==============================================================================
# DTO → Domain
# ==============================================================================


def test_to_search_query_maps_enginesize() -> None:
    dto = VehicleSearchQueryDTO(make="Toyota", model="Cor", year="2020", enginesize="1.8")

    result = CatalogMapper.to_search_query(dto)

    assert result == SearchQuery(make="Toyota", model="Cor", year="2020", engine_size="1.8")


def test_to_search_query_blank_params_mean_no_constraint() -> None:
    dto = VehicleSearchQueryDTO(make="  ", enginesize="")

    result = CatalogMapper.to_search_query(dto)

    assert result.is_empty


def test_to_sort_key_recognized_values() -> None:
    assert CatalogMapper.to_sort_key(VehicleSearchQueryDTO(sort="price")) is SortKey.PRICE
    assert CatalogMapper.to_sort_key(VehicleSearchQueryDTO(sort=" Date ")) is SortKey.DATE


def test_to_sort_key_unrecognized_value_keeps_source_order() -> None:
    assert CatalogMapper.to_sort_key(VehicleSearchQueryDTO(sort="mileage")) is None
    assert CatalogMapper.to_sort_key(VehicleSearchQueryDTO()) is None


def test_to_domain_request() -> None:
    request = CatalogMapper.to_domain_request(VehicleSearchQueryDTO(make="honda", sort="year"))

    assert request.query == SearchQuery(make="honda")
    assert request.sort_key is SortKey.YEAR


# ==============================================================================
# Domain → DTO
# ==============================================================================


def test_to_response_with_cards() -> None:
    view = CatalogView(cards=[_card("1"), _card("2")])

    result = CatalogMapper.to_response(view)

    assert isinstance(result, CatalogResponseDTO)
    assert result.total == 2
    assert result.notice is None
    assert [card.id for card in result.cards] == ["1", "2"]
    assert result.cards[0].fallback_image_src == "images/placeholder.png"


def test_to_response_with_notice() -> None:
    view = CatalogView(notice=CatalogNotice(message="No vehicles found."))

    result = CatalogMapper.to_response(view)

    assert result.total == 0
    assert result.cards == []
    assert result.notice is not None
    assert result.notice.message == "No vehicles found."
    assert result.notice.tone == "muted"
