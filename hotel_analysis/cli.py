import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml
from dotenv import load_dotenv

from hotel_analysis.config import DEFAULT_CONFIG_FILE, load_analysis_config
from hotel_analysis.loader import BookingDataError, load_bookings
from hotel_analysis.report import HotelReport

DATASET_ENV_VAR = "HOTEL_ANALYSIS_DATASET"


def parse_column_overrides(pairs: Optional[List[str]]) -> Dict[str, str]:
    """Turn ["rooms=No. Of Rooms", ...] into {"rooms": "No. Of Rooms"}."""
    overrides: Dict[str, str] = {}
    for pair in pairs or []:
        field, sep, header = pair.partition("=")
        if not sep or not field.strip() or not header.strip():
            raise ValueError(f"column override must look like FIELD=HEADER, got {pair!r}")
        overrides[field.strip()] = header.strip()
    return overrides


def run_analysis(
    dataset_file: Optional[Path],
    config_file: Path,
    column_overrides: Optional[Dict[str, str]] = None,
) -> Tuple[int, Dict[str, object]]:
    """Core runner used by both CLI and service layer.

    Dataset precedence: explicit argument, then HOTEL_ANALYSIS_DATASET
    (environment or .env), then the config file.

    Returns:
        (booking_count, context_dict)
    """
    load_dotenv()

    cfg = load_analysis_config(config_file)
    if column_overrides:
        cfg.columns.update(column_overrides)

    if dataset_file is None:
        env_dataset = os.environ.get(DATASET_ENV_VAR)
        dataset_file = Path(env_dataset) if env_dataset else cfg.dataset_file
    cfg.dataset_file = Path(dataset_file)

    bookings = load_bookings(cfg.dataset_file, column_map=cfg.columns, delimiter=cfg.delimiter)
    report = HotelReport(bookings)

    context = {
        "config": cfg,
        "bookings": bookings,
        "report": report,
        "top_country": report.top_country(),
        "most_economical": report.most_economical(),
        "most_profitable": report.most_profitable(),
    }
    return len(bookings), context


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Hotel booking analysis – top country, most economical and most profitable hotel"
    )
    parser.add_argument(
        "--dataset",
        default=None,
        help=f"bookings CSV (default: ${DATASET_ENV_VAR} or dataset_file from config)",
    )
    parser.add_argument("--config-file", default=str(DEFAULT_CONFIG_FILE))
    parser.add_argument(
        "--column",
        action="append",
        default=None,
        metavar="FIELD=HEADER",
        help="override the CSV header used for a field, e.g. rooms='No. Of Rooms'",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="logging level (default: log_level from config)",
    )
    parser.add_argument(
        "--preview",
        type=int,
        default=0,
        help="print the first N loaded bookings",
    )

    args = parser.parse_args(argv)

    config_file = Path(args.config_file)
    log_level = args.log_level
    if log_level is None:
        try:
            log_level = load_analysis_config(config_file).log_level
        except (OSError, yaml.YAMLError):
            # run_analysis reports the unreadable config below
            log_level = "INFO"
    logging.basicConfig(
        level=getattr(logging, str(log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        overrides = parse_column_overrides(args.column)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        count, ctx = run_analysis(
            dataset_file=Path(args.dataset) if args.dataset else None,
            config_file=config_file,
            column_overrides=overrides,
        )
    except (OSError, yaml.YAMLError, BookingDataError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    dataset_file = ctx["config"].dataset_file
    if count == 0:
        print(f"No bookings loaded from {dataset_file}.")
        return 0

    print(f"Loaded {count} bookings from {dataset_file}.")
    for b in ctx["bookings"][: max(0, args.preview)]:
        print(f"  {b}")

    country, bookings_count = ctx["top_country"]
    print("\nQuestion 1:")
    print(f"Top Country: {country} ({bookings_count} bookings)")

    econ_hotel, econ_score = ctx["most_economical"]
    print("\nQuestion 2:")
    print(f"Most Economical Hotel: {econ_hotel}")
    print(f"Score: {econ_score:.2f}%")

    profit_hotel, profit_score = ctx["most_profitable"]
    print("\nQuestion 3:")
    print(f"Best Performing Hotel: {profit_hotel}")
    print(f"Score: {profit_score:.2f}%")
    return 0


if __name__ == "__main__":
    sys.exit(main())
