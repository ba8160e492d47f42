import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence

import numpy as np
import pandas as pd

from hotel_analysis.models import Booking

logger = logging.getLogger(__name__)


# Logical field -> header name in the bookings CSV.
DEFAULT_COLUMNS: Dict[str, str] = {
    "booking_id": "Booking ID",
    "destination_country": "Destination Country",
    "destination_city": "Destination City",
    "hotel_name": "Hotel Name",
    "visitors": "No. Of People",
    "price": "Booking Price[SGD]",
    "discount": "Discount",
    "profit_margin": "Profit Margin",
    "days": "No of Days",
    "rooms": "Rooms",
}

TEXT_FIELDS = ["booking_id", "destination_country", "destination_city", "hotel_name"]
INT_FIELDS = ["visitors", "days", "rooms"]
FLOAT_FIELDS = ["price", "discount", "profit_margin"]


class BookingDataError(Exception):
    """Base class for problems reading a bookings file."""


class MissingColumnError(BookingDataError):
    def __init__(self, missing: Sequence[str]):
        self.missing = list(missing)
        super().__init__(f"missing required column(s): {', '.join(self.missing)}")


def resolve_columns(header: Sequence[str], column_map: Mapping[str, str]) -> Dict[str, str]:
    """Map each logical field to its actual header in the file.

    Header names are matched after stripping whitespace. Raises
    MissingColumnError listing every required header that is absent.
    """
    actual_by_name: Dict[str, str] = {}
    for name in header:
        actual_by_name.setdefault(str(name).strip(), name)

    resolved: Dict[str, str] = {}
    missing: List[str] = []
    for field, column in column_map.items():
        actual = actual_by_name.get(column.strip())
        if actual is None:
            missing.append(column)
        else:
            resolved[field] = actual

    if missing:
        raise MissingColumnError(missing)
    return resolved


def parse_discount(values: pd.Series) -> pd.Series:
    """'15%' -> 0.15 (the percent sign is optional); unparseable -> NaN."""
    text = values.astype(str).str.replace("%", "", regex=False).str.strip()
    return pd.to_numeric(text, errors="coerce") / 100.0


def clean_bookings_frame(df: pd.DataFrame, columns: Mapping[str, str]) -> pd.DataFrame:
    """Select, type and validate booking columns.

    Rows with a missing field, a non-numeric or non-finite number, a
    fractional count, negative visitors/price or non-positive rooms/days
    are dropped. Exact duplicates are removed, keeping the first.
    """
    frame = df[[columns[f] for f in columns]].copy()
    frame.columns = list(columns)
    frame = frame.dropna(subset=TEXT_FIELDS)
    for field in TEXT_FIELDS:
        frame[field] = frame[field].astype(str).str.strip()

    for field in INT_FIELDS + ["price", "profit_margin"]:
        frame[field] = pd.to_numeric(frame[field].astype(str).str.strip(), errors="coerce")
    frame["discount"] = parse_discount(frame["discount"])

    numeric = frame[INT_FIELDS + FLOAT_FIELDS].astype(float)
    valid = np.isfinite(numeric).all(axis=1)
    valid &= (numeric[INT_FIELDS] == numeric[INT_FIELDS].round()).all(axis=1)
    valid &= (numeric["visitors"] >= 0) & (numeric["price"] >= 0)
    valid &= (numeric["days"] > 0) & (numeric["rooms"] > 0)

    frame = frame[valid].copy()
    for field in INT_FIELDS:
        frame[field] = frame[field].astype(int)
    return frame.drop_duplicates(keep="first").reset_index(drop=True)


def load_bookings(
    path: Path,
    column_map: Optional[Mapping[str, str]] = None,
    delimiter: str = ",",
) -> List[Booking]:
    """Read a bookings CSV into deduplicated Booking records.

    Columns are located by header name once per file. Rows that fail to
    parse are dropped; a missing header raises MissingColumnError.
    """
    if column_map is None:
        column_map = DEFAULT_COLUMNS

    path = Path(path)
    try:
        df = pd.read_csv(
            path,
            sep=delimiter,
            encoding="utf-8-sig",
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            on_bad_lines="skip",
        )
    except pd.errors.EmptyDataError:
        raise MissingColumnError(list(column_map.values())) from None
    except pd.errors.ParserError as exc:
        raise BookingDataError(f"could not parse {path}: {exc}") from exc

    logger.debug("read %d data rows from %s", len(df), path)

    columns = resolve_columns(list(df.columns), column_map)
    frame = clean_bookings_frame(df, columns)

    bookings = [
        Booking(
            booking_id=row.booking_id,
            destination_country=row.destination_country,
            destination_city=row.destination_city,
            hotel_name=row.hotel_name,
            visitors=int(row.visitors),
            price=float(row.price),
            discount=float(row.discount),
            profit_margin=float(row.profit_margin),
            days=int(row.days),
            rooms=int(row.rooms),
        )
        for row in frame[list(columns)].itertuples(index=False)
    ]
    logger.info(
        "loaded %d bookings from %s (%d rows dropped as malformed or duplicate)",
        len(bookings),
        path,
        len(df) - len(bookings),
    )
    return bookings
