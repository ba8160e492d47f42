from pathlib import Path

from hotel_analysis.config import ROOT, load_analysis_config
from hotel_analysis.loader import DEFAULT_COLUMNS


def test_bundled_config_points_at_sample():
    cfg = load_analysis_config()
    assert cfg.dataset_file == ROOT / "data" / "sample_bookings.csv"
    assert cfg.columns == DEFAULT_COLUMNS
    assert cfg.log_level == "INFO"


def test_partial_config_keeps_defaults(tmp_path: Path):
    path = tmp_path / "analysis.yaml"
    path.write_text(
        "dataset_file: /data/bookings.tsv\n"
        "delimiter: \"\\t\"\n"
        "log_level: debug\n"
        "columns:\n"
        "  rooms: No. Of Rooms\n",
        encoding="utf-8",
    )
    cfg = load_analysis_config(path)
    assert cfg.dataset_file == Path("/data/bookings.tsv")
    assert cfg.delimiter == "\t"
    assert cfg.log_level == "DEBUG"
    assert cfg.columns["rooms"] == "No. Of Rooms"
    assert cfg.columns["hotel_name"] == DEFAULT_COLUMNS["hotel_name"]


def test_empty_config_file(tmp_path: Path):
    path = tmp_path / "analysis.yaml"
    path.write_text("", encoding="utf-8")
    cfg = load_analysis_config(path)
    assert cfg.delimiter == ","
    assert cfg.columns == DEFAULT_COLUMNS
