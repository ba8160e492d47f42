from collections import defaultdict
from typing import Dict, Iterable, List

from hotel_analysis.models import Booking, HotelKey


def hotel_key(booking: Booking) -> HotelKey:
    return HotelKey(
        hotel_name=booking.hotel_name,
        destination_city=booking.destination_city,
        destination_country=booking.destination_country,
    )


def group_by_hotel(bookings: Iterable[Booking]) -> Dict[HotelKey, List[Booking]]:
    """Partition bookings by (hotel_name, city, country)."""
    by_hotel: Dict[HotelKey, List[Booking]] = defaultdict(list)
    for b in bookings:
        by_hotel[hotel_key(b)].append(b)
    return dict(by_hotel)


def group_by_country(bookings: Iterable[Booking]) -> Dict[str, List[Booking]]:
    by_country: Dict[str, List[Booking]] = defaultdict(list)
    for b in bookings:
        by_country[b.destination_country].append(b)
    return dict(by_country)
