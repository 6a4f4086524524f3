from pathlib import Path

import pytest

from capacity_extender.utils.config import ExtenderSettings

GOLDEN_DIR = Path(__file__).parent / "golden"

SAMPLE_ROSTER = (
    "Nom;Capacité;Mois;Année;BU\n"
    "Alice;80;01/01/2024;2024;Eng\n"
    "Bob;50;01/02/2024;2024;Sales"
)


@pytest.fixture
def sample_roster() -> str:
    return SAMPLE_ROSTER


@pytest.fixture
def golden_dir() -> Path:
    return GOLDEN_DIR


@pytest.fixture
def roster_file(tmp_path) -> Path:
    path = tmp_path / "capacity.csv"
    path.write_text(SAMPLE_ROSTER, encoding="utf-8")
    return path


@pytest.fixture
def test_settings(tmp_path) -> ExtenderSettings:
    """Settings isolated from any .env, writing under tmp_path."""
    return ExtenderSettings(
        output_dir=tmp_path / "output",
        strict_dates=True,
        skip_existing=False,
    )
