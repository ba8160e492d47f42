from collections import Counter

from hotel_analysis.grouping import group_by_country, group_by_hotel
from hotel_analysis.models import HotelKey

from conftest import make_booking


def test_group_by_hotel_partitions_input(bookings):
    groups = group_by_hotel(bookings)

    members = [b for group in groups.values() for b in group]
    assert Counter(members) == Counter(bookings)
    assert set(groups) == {
        HotelKey("Marina", "Singapore", "Singapore"),
        HotelKey("Riverside", "Bangkok", "Thailand"),
        HotelKey("Petronas", "Kuala Lumpur", "Malaysia"),
    }


def test_same_hotel_name_in_different_cities_is_split():
    a = make_booking("B1", "Thailand", "Bangkok", "Grand")
    b = make_booking("B2", "Thailand", "Phuket", "Grand")
    groups = group_by_hotel([a, b])
    assert len(groups) == 2
    assert groups[HotelKey("Grand", "Bangkok", "Thailand")] == [a]


def test_group_by_country_keeps_multiplicity():
    a = make_booking("B1", "A")
    groups = group_by_country([a, a, make_booking("B2", "B")])
    assert len(groups["A"]) == 2
    assert len(groups["B"]) == 1


def test_grouping_empty_input():
    assert group_by_hotel([]) == {}
    assert group_by_country([]) == {}
