import threading
from pathlib import Path
from typing import Dict, Optional

import yaml
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from hotel_analysis import __version__
from hotel_analysis.cli import run_analysis
from hotel_analysis.config import DEFAULT_CONFIG_FILE
from hotel_analysis.loader import BookingDataError
from hotel_analysis.report import HotelReport


class TopCountryResponse(BaseModel):
    country: str = Field(..., description="Destination country with the most bookings")
    bookings: int


class HotelScoreResponse(BaseModel):
    hotel: str = Field(..., description="Hotel label, e.g. 'Name (City, Country)'")
    score: float = Field(..., description="Composite score, nominally 0-100")


class SummaryResponse(BaseModel):
    booking_count: int
    top_country: TopCountryResponse
    most_economical: HotelScoreResponse
    most_profitable: HotelScoreResponse


def create_app(
    report: Optional[HotelReport] = None,
    config_file: Optional[Path] = None,
) -> FastAPI:
    """Build the API around a fixed booking report.

    Without an explicit report, bookings are loaded from config on the first
    request and reused for the life of the app. A dataset that cannot be
    loaded answers 503 and is retried on the next request.
    """
    app = FastAPI(title="Hotel Booking Analysis API", version=__version__)
    state: Dict[str, Optional[HotelReport]] = {"report": report}
    lock = threading.Lock()

    def get_report() -> HotelReport:
        with lock:
            if state["report"] is None:
                try:
                    _, ctx = run_analysis(
                        dataset_file=None,
                        config_file=config_file or DEFAULT_CONFIG_FILE,
                    )
                except (OSError, yaml.YAMLError, BookingDataError) as exc:
                    raise HTTPException(status_code=503, detail=f"bookings unavailable: {exc}") from exc
                state["report"] = ctx["report"]
            return state["report"]

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/top-country", response_model=TopCountryResponse)
    def top_country():
        country, count = get_report().top_country()
        return TopCountryResponse(country=country, bookings=count)

    @app.get("/most-economical", response_model=HotelScoreResponse)
    def most_economical():
        hotel, score = get_report().most_economical()
        return HotelScoreResponse(hotel=hotel, score=score)

    @app.get("/most-profitable", response_model=HotelScoreResponse)
    def most_profitable():
        hotel, score = get_report().most_profitable()
        return HotelScoreResponse(hotel=hotel, score=score)

    @app.get("/summary", response_model=SummaryResponse)
    def summary():
        """All three answers in one response, as printed by the CLI."""
        rep = get_report()
        country, count = rep.top_country()
        econ_hotel, econ_score = rep.most_economical()
        profit_hotel, profit_score = rep.most_profitable()
        return SummaryResponse(
            booking_count=len(rep),
            top_country=TopCountryResponse(country=country, bookings=count),
            most_economical=HotelScoreResponse(hotel=econ_hotel, score=econ_score),
            most_profitable=HotelScoreResponse(hotel=profit_hotel, score=profit_score),
        )

    return app


app = create_app()


def run():
    """Entry point for `hotel-analysis-api` console script."""
    import uvicorn

    uvicorn.run("service.api:app", host="0.0.0.0", port=8000, reload=False)
