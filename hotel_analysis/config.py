from pathlib import Path
from typing import Dict, Optional

import yaml

from hotel_analysis.loader import DEFAULT_COLUMNS

ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_FILE = ROOT / "config" / "analysis.yaml"
DEFAULT_DATASET_FILE = ROOT / "data" / "sample_bookings.csv"


class AnalysisConfig:
    def __init__(
        self,
        dataset_file: Path = DEFAULT_DATASET_FILE,
        delimiter: str = ",",
        log_level: str = "INFO",
        columns: Optional[Dict[str, str]] = None,
    ):
        self.dataset_file = dataset_file
        self.delimiter = delimiter
        self.log_level = log_level
        self.columns = dict(DEFAULT_COLUMNS)
        if columns:
            self.columns.update(columns)


def _resolve_path(value: str, base: Path) -> Path:
    path = Path(value)
    if not path.is_absolute():
        path = base / path
    return path


def load_analysis_config(path: Optional[Path] = None) -> AnalysisConfig:
    """Load config/analysis.yaml; any missing key keeps its default.

    Relative dataset paths are resolved against the project root.
    """
    if path is None:
        path = DEFAULT_CONFIG_FILE
    with Path(path).open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    dataset = raw.get("dataset_file")
    columns = raw.get("columns", {}) or {}

    return AnalysisConfig(
        dataset_file=_resolve_path(str(dataset), ROOT) if dataset else DEFAULT_DATASET_FILE,
        delimiter=str(raw.get("delimiter", ",")),
        log_level=str(raw.get("log_level", "INFO")).upper(),
        columns={str(k): str(v) for k, v in columns.items()},
    )
