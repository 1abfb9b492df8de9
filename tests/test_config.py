"""Tests for configuration loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from parking_status.config import AppConfig, get_config_path, load_config


def write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(text)
    return path


def test_defaults():
    config = AppConfig()

    assert config.lots == []
    assert config.use_sample_data is True
    assert config.refresh.interval_seconds == 30
    assert config.api.port == 8000
    assert config.logging.level == "INFO"


def test_load_lots(tmp_path):
    path = write_config(
        tmp_path,
        """
lots:
  - name: "North"
    hourly_rate: 1.25
    rows: 2
    cols: 3
    occupied:
      - {row: 0, col: 1, vehicle_id: "N1"}
refresh:
  interval_seconds: 5
logging:
  level: debug
""",
    )

    config = load_config(path)

    assert len(config.lots) == 1
    lot = config.lots[0]
    assert (lot.name, lot.hourly_rate, lot.rows, lot.cols) == ("North", 1.25, 2, 3)
    assert lot.occupied[0].vehicle_id == "N1"
    assert config.refresh.interval_seconds == 5
    assert config.logging.level == "DEBUG"


def test_empty_file_gives_defaults(tmp_path):
    config = load_config(write_config(tmp_path, ""))

    assert config == AppConfig()


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    "lot_yaml",
    [
        '{name: "X", hourly_rate: -1, rows: 1, cols: 1}',
        '{name: "X", hourly_rate: 1, rows: 0, cols: 1}',
        '{name: "X", hourly_rate: 1, rows: 1, cols: -3}',
        '{name: "  ", hourly_rate: 1, rows: 1, cols: 1}',
        '{name: "current", hourly_rate: 1, rows: 1, cols: 1}',
    ],
)
def test_invalid_lot_rejected(tmp_path, lot_yaml):
    path = write_config(tmp_path, f"lots:\n  - {lot_yaml}\n")

    with pytest.raises(ValidationError):
        load_config(path)


def test_invalid_log_level_rejected(tmp_path):
    path = write_config(tmp_path, "logging:\n  level: chatty\n")

    with pytest.raises(ValueError):
        load_config(path)


def test_config_path_from_environment(monkeypatch, tmp_path):
    target = tmp_path / "custom.yaml"
    monkeypatch.setenv("PARKING_STATUS_CONFIG", str(target))

    assert get_config_path() == target


def test_example_config_is_valid():
    example = Path(__file__).parent.parent / "config" / "config.example.yaml"

    config = load_config(example)

    assert [lot.name for lot in config.lots] == ["Downtown Mall", "City Hospital"]


def test_reserved_name_only_matches_exactly():
    config = AppConfig(lots=[{"name": "Current Street", "hourly_rate": 1, "rows": 1, "cols": 1}])

    assert config.lots[0].name == "Current Street"
