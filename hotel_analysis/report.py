from typing import Iterable, Tuple, TypeVar

from hotel_analysis.models import Booking
from hotel_analysis.queries import (
    BookingQuery,
    MostEconomicalHotel,
    MostProfitableHotel,
    TopCountry,
)

T = TypeVar("T")


class HotelReport:
    """Binds the three booking questions to one fixed booking collection.

    Used by both the CLI and the HTTP service; holds no state beyond the
    bookings themselves.
    """

    def __init__(self, bookings: Iterable[Booking]):
        self.bookings: Tuple[Booking, ...] = tuple(bookings)

    def __len__(self) -> int:
        return len(self.bookings)

    def run_query(self, query: BookingQuery[T]) -> T:
        return query.execute(self.bookings)

    def top_country(self) -> Tuple[str, int]:
        return self.run_query(TopCountry())

    def most_economical(self) -> Tuple[str, float]:
        return self.run_query(MostEconomicalHotel())

    def most_profitable(self) -> Tuple[str, float]:
        return self.run_query(MostProfitableHotel())
