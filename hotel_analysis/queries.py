import logging
from abc import ABC, abstractmethod
from typing import Dict, Generic, Iterable, List, Sequence, Tuple, TypeVar

from hotel_analysis.grouping import group_by_country, group_by_hotel
from hotel_analysis.models import Booking, HotelKey, HotelMetrics, PerformanceMetrics
from hotel_analysis.stats import get_range, normalize

logger = logging.getLogger(__name__)

T = TypeVar("T")

NO_COUNTRY_DATA = ("No data is found", 0)
NO_HOTEL_DATA = ("No Data", 0.0)


class BookingQuery(ABC, Generic[T]):
    name: str

    @abstractmethod
    def execute(self, bookings: Sequence[Booking]) -> T:
        """Answer this query over a fixed, read-only booking collection."""
        raise NotImplementedError


def _pick_best(scored: Iterable[Tuple[str, T]]) -> Tuple[str, T]:
    """Highest value wins; ties go to the lexicographically smallest label."""
    best = None
    for label, value in scored:
        if (
            best is None
            or value > best[1]
            or (value == best[1] and label < best[0])
        ):
            best = (label, value)
    return best


def _mean(values: List[float]) -> float:
    return sum(values) / len(values)


class TopCountry(BookingQuery[Tuple[str, int]]):
    """Question 1: the destination country with the most bookings."""

    name = "top_country"

    def execute(self, bookings: Sequence[Booking]) -> Tuple[str, int]:
        counts = {
            country: len(group)
            for country, group in group_by_country(bookings).items()
        }
        if not counts:
            return NO_COUNTRY_DATA

        result = _pick_best(counts.items())
        logger.debug("top country over %d countries: %s", len(counts), result)
        return result


class MostEconomicalHotel(BookingQuery[Tuple[str, float]]):
    """Question 2: cheapest per room-day, biggest discount, lowest margin.

    Each metric is averaged per hotel, min/max normalised across hotels and
    combined as ((1 - price) + discount + (1 - margin)) * 100 / 3.
    """

    name = "most_economical"

    def _hotel_metrics(self, bookings: Sequence[Booking]) -> Dict[HotelKey, HotelMetrics]:
        metrics: Dict[HotelKey, HotelMetrics] = {}
        for key, group in group_by_hotel(bookings).items():
            metrics[key] = HotelMetrics(
                avg_price_per_room_day=_mean([b.price / (b.rooms * b.days) for b in group]),
                avg_discount=_mean([b.discount for b in group]),
                avg_margin=_mean([b.profit_margin for b in group]),
            )
        return metrics

    def scores(self, bookings: Sequence[Booking]) -> List[Tuple[str, float]]:
        """(label, score) for every hotel, in grouping order."""
        hotel_metrics = self._hotel_metrics(bookings)
        stats = list(hotel_metrics.values())

        min_p, max_p = get_range(stats, lambda m: m.avg_price_per_room_day)
        min_d, max_d = get_range(stats, lambda m: m.avg_discount)
        min_m, max_m = get_range(stats, lambda m: m.avg_margin)

        scored = []
        for key, m in hotel_metrics.items():
            norm_price = normalize(m.avg_price_per_room_day, min_p, max_p, 0.0)
            norm_disc = normalize(m.avg_discount, min_d, max_d, 1.0)
            norm_marg = normalize(m.avg_margin, min_m, max_m, 0.0)

            score = ((1 - norm_price) + norm_disc + (1 - norm_marg)) * 100 / 3.0
            label = f"{key.hotel_name} ({key.destination_city} ,{key.destination_country})"
            scored.append((label, score))
        return scored

    def execute(self, bookings: Sequence[Booking]) -> Tuple[str, float]:
        if not bookings:
            return NO_HOTEL_DATA

        scored = self.scores(bookings)
        result = _pick_best(scored)
        logger.debug("most economical over %d hotels: %s", len(scored), result)
        return result


class MostProfitableHotel(BookingQuery[Tuple[str, float]]):
    """Question 3: most visitors and highest average margin, both rewarded."""

    name = "most_profitable"

    def _performance_metrics(
        self, bookings: Sequence[Booking]
    ) -> Dict[HotelKey, PerformanceMetrics]:
        metrics: Dict[HotelKey, PerformanceMetrics] = {}
        for key, group in group_by_hotel(bookings).items():
            metrics[key] = PerformanceMetrics(
                total_visitors=sum(b.visitors for b in group),
                avg_margin=_mean([b.profit_margin for b in group]),
            )
        return metrics

    def scores(self, bookings: Sequence[Booking]) -> List[Tuple[str, float]]:
        performance = self._performance_metrics(bookings)
        stats = list(performance.values())

        min_v, max_v = get_range(stats, lambda m: float(m.total_visitors))
        min_m, max_m = get_range(stats, lambda m: m.avg_margin)

        scored = []
        for key, m in performance.items():
            norm_visitors = normalize(float(m.total_visitors), min_v, max_v, 1.0)
            norm_margin = normalize(m.avg_margin, min_m, max_m, 1.0)

            score = (norm_visitors + norm_margin) * 100 / 2.0
            label = f"{key.hotel_name} ({key.destination_city}, {key.destination_country})"
            scored.append((label, score))
        return scored

    def execute(self, bookings: Sequence[Booking]) -> Tuple[str, float]:
        if not bookings:
            return NO_HOTEL_DATA

        scored = self.scores(bookings)
        result = _pick_best(scored)
        logger.debug("most profitable over %d hotels: %s", len(scored), result)
        return result
