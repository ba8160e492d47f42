from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True)
class Booking:
    booking_id: str
    destination_country: str   # "Singapore"
    destination_city: str      # "Singapore"
    hotel_name: str
    visitors: int
    price: float               # total booking price, currency-agnostic
    discount: float            # fraction, "15%" -> 0.15
    profit_margin: float
    days: int
    rooms: int


class HotelKey(NamedTuple):
    hotel_name: str
    destination_city: str
    destination_country: str


@dataclass
class HotelMetrics:
    avg_price_per_room_day: float
    avg_discount: float
    avg_margin: float


@dataclass
class PerformanceMetrics:
    total_visitors: int
    avg_margin: float
