from typing import List

import pytest

from hotel_analysis.models import Booking


def make_booking(
    booking_id: str = "B1",
    country: str = "Singapore",
    city: str = "Singapore",
    hotel: str = "Hotel A",
    visitors: int = 2,
    price: float = 100.0,
    discount: float = 0.1,
    profit_margin: float = 0.2,
    days: int = 1,
    rooms: int = 1,
) -> Booking:
    return Booking(
        booking_id=booking_id,
        destination_country=country,
        destination_city=city,
        hotel_name=hotel,
        visitors=visitors,
        price=price,
        discount=discount,
        profit_margin=profit_margin,
        days=days,
        rooms=rooms,
    )


@pytest.fixture
def bookings() -> List[Booking]:
    return [
        make_booking("B1", "Singapore", "Singapore", "Marina", visitors=2, price=300.0, discount=0.10, profit_margin=0.20, days=3),
        make_booking("B2", "Singapore", "Singapore", "Marina", visitors=3, price=400.0, discount=0.15, profit_margin=0.18, days=2),
        make_booking("B3", "Thailand", "Bangkok", "Riverside", visitors=4, price=160.0, discount=0.20, profit_margin=0.10, days=2),
        make_booking("B4", "Malaysia", "Kuala Lumpur", "Petronas", visitors=5, price=600.0, discount=0.00, profit_margin=0.25, days=3),
    ]
