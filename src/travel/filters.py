"""
List filtering for the travel search page.

The travel service always returns the full catalogue; narrowing it down
to what the user typed into the search form happens here, on the returned
sequence.
"""

from typing import Iterable, List

from src.travel.schemas import TravelOption, TravelOptionFilters


def matches(option: TravelOption, filters: TravelOptionFilters) -> bool:
    """True when ``option`` satisfies every filter that is set"""
    if filters.id and filters.id.lower() not in option.id.lower():
        return False
    if filters.type and option.type != filters.type:
        return False
    if filters.source and filters.source.lower() not in option.source.lower():
        return False
    if filters.destination and filters.destination.lower() not in option.destination.lower():
        return False

    if filters.departure_date and option.departure_time.date() != filters.departure_date:
        return False
    # Zero-padded HH:MM strings compare in clock order
    if filters.departure_after and option.departure_time.strftime("%H:%M") < filters.departure_after:
        return False

    if filters.min_price is not None and option.price < filters.min_price:
        return False
    if filters.max_price is not None and option.price > filters.max_price:
        return False
    if filters.min_seats is not None and option.available_seats < filters.min_seats:
        return False
    return True


def filter_travel_options(
    options: Iterable[TravelOption],
    filters: TravelOptionFilters,
) -> List[TravelOption]:
    return [option for option in options if matches(option, filters)]
