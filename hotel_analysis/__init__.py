from .models import Booking, HotelKey
from .report import HotelReport
from .queries import BookingQuery, MostEconomicalHotel, MostProfitableHotel, TopCountry

__version__ = "1.0.0"

__all__ = [
    "Booking",
    "HotelKey",
    "HotelReport",
    "BookingQuery",
    "TopCountry",
    "MostEconomicalHotel",
    "MostProfitableHotel",
]
