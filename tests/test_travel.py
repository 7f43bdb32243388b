from datetime import date, datetime, timezone
from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.exceptions import NotFoundError
from src.travel.filters import filter_travel_options
from src.travel.schemas import TravelOption, TravelOptionFilters, TravelType


def ids(options):
    return [o.id for o in options]


async def test_list_returns_whole_catalogue(travel_service):
    options = await travel_service.list_travel_options()
    assert ids(options) == ["F123", "T456", "B789", "F234", "F999", "T567"]


async def test_list_returns_copies(db, travel_service):
    options = await travel_service.list_travel_options()
    options[0].available_seats = 1
    assert db.find_travel_option("F123").available_seats == 120


async def test_get_travel_option(travel_service):
    option = await travel_service.get_travel_option("T567")
    assert option.type == TravelType.TRAIN
    assert option.duration_minutes == 165
    assert not option.is_sold_out


async def test_get_travel_option_unknown(travel_service):
    with pytest.raises(NotFoundError):
        await travel_service.get_travel_option("t567")


async def test_sold_out_flag(travel_service):
    assert (await travel_service.get_travel_option("F999")).is_sold_out


def test_option_rejects_more_available_than_total(db):
    data = db.find_travel_option("F123").model_dump(exclude={"duration_minutes", "is_sold_out"})
    data["available_seats"] = 181
    with pytest.raises(ValidationError):
        TravelOption(**data)


def test_option_rejects_arrival_before_departure(db):
    data = db.find_travel_option("F123").model_dump(exclude={"duration_minutes", "is_sold_out"})
    data["arrival_time"] = datetime(2024, 9, 10, 8, 0, tzinfo=timezone.utc)
    with pytest.raises(ValidationError):
        TravelOption(**data)


def test_seat_assignment_outside_bounds_is_rejected(db):
    option = db.find_travel_option("B789")
    with pytest.raises(ValidationError):
        option.available_seats = -1
    with pytest.raises(ValidationError):
        option.available_seats = 51
    assert option.available_seats == 2
    assert option.total_seats == 50


def test_schedule_assignment_before_departure_is_rejected(db):
    option = db.find_travel_option("F123")
    arrival = option.arrival_time
    with pytest.raises(ValidationError):
        option.arrival_time = datetime(2024, 9, 10, 8, 0, tzinfo=timezone.utc)
    assert option.arrival_time == arrival


@pytest.mark.parametrize(
    "filters, expected",
    [
        (TravelOptionFilters(), ["F123", "T456", "B789", "F234", "F999", "T567"]),
        (TravelOptionFilters(id="f"), ["F123", "F234", "F999"]),
        (TravelOptionFilters(type=TravelType.TRAIN), ["T456", "T567"]),
        (TravelOptionFilters(source="los angeles"), ["T567"]),
        (TravelOptionFilters(destination="new york"), ["T456", "B789"]),
        (TravelOptionFilters(departure_date=date(2024, 9, 11)), ["B789"]),
        (TravelOptionFilters(departure_after="14:00"), ["T456", "F999"]),
        (TravelOptionFilters(min_price=Decimal("180"), max_price=Decimal("400")), ["F123", "F999"]),
        (TravelOptionFilters(min_seats=100), ["F123", "T567"]),
        (TravelOptionFilters(type=TravelType.FLIGHT, min_seats=1, max_price=Decimal("400")), ["F123"]),
    ],
)
async def test_filters(travel_service, filters, expected):
    options = await travel_service.list_travel_options()
    assert ids(filter_travel_options(options, filters)) == expected
