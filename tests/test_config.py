"""Tests for configuration loading."""

import pytest

from kintai.config import Settings
from kintai.duration import Duration
from kintai.errors import ConfigError, KintaiError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Make sure no real settings leak in from the environment."""
    for name in (
        "KINTAI_WAGE_YEN",
        "KINTAI_BREAK_MINUTES",
        "KINTAI_STANDARD_START",
        "KINTAI_STANDARD_END",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    """Defaults match the standard shift."""
    settings = Settings()

    assert settings.wage_yen == 1500
    assert settings.break_minutes == 60
    assert settings.standard_start == Duration.parse("09:30")
    assert settings.standard_end == Duration.parse("18:30")
    assert settings.standard_work_minutes == 480
    assert settings.overtime_multiplier == 1.25


def test_save_and_load(tmp_path):
    """Settings survive a save/load cycle."""
    path = tmp_path / "kintai" / "config.ini"
    settings = Settings(
        wage_yen=1800,
        break_minutes=45,
        standard_start=Duration.parse("09:00"),
        standard_end=Duration.parse("17:45"),
    )

    settings.save(path)

    assert Settings.load(path) == settings


def test_load_missing_file(tmp_path):
    """A missing file gives None."""
    assert Settings.load(tmp_path / "missing.ini") is None


def test_from_env(monkeypatch):
    """The wage variable is required, the rest default."""
    assert Settings.from_env() is None

    monkeypatch.setenv("KINTAI_WAGE_YEN", "2000")
    monkeypatch.setenv("KINTAI_STANDARD_START", "10:00")

    settings = Settings.from_env()
    assert settings.wage_yen == 2000
    assert settings.break_minutes == 60
    assert settings.standard_start == Duration.parse("10:00")
    assert settings.standard_end == Duration.parse("18:30")


def test_resolve_prefers_env_then_file(monkeypatch, tmp_path):
    """Environment, then file, then defaults."""
    path = tmp_path / "config.ini"
    assert Settings.resolve(path) == Settings()

    Settings(wage_yen=1700).save(path)
    assert Settings.resolve(path).wage_yen == 1700

    monkeypatch.setenv("KINTAI_WAGE_YEN", "1900")
    assert Settings.resolve(path).wage_yen == 1900


def test_invalid_env_is_a_config_error(monkeypatch):
    """A non-numeric wage is reported as a configuration error."""
    monkeypatch.setenv("KINTAI_WAGE_YEN", "lots")
    with pytest.raises(KintaiError):
        Settings.from_env()

    monkeypatch.setenv("KINTAI_WAGE_YEN", "1500")
    monkeypatch.setenv("KINTAI_STANDARD_START", "9am")
    with pytest.raises(ConfigError):
        Settings.resolve()


@pytest.mark.parametrize(
    "content",
    [
        "[kintai]\nbreakMinutes = 60\nstandardStart = 09:30\nstandardEnd = 18:30\n",
        "[other]\nwageYen = 1500\n",
        "[kintai]\nwageYen = 1500\nbreakMinutes = 60\nstandardStart = 9\nstandardEnd = 18:30\n",
        "not an ini file\n",
    ],
)
def test_broken_file_is_a_config_error(tmp_path, content):
    """Missing keys, missing sections and bad values all raise ConfigError."""
    path = tmp_path / "config.ini"
    path.write_text(content)

    with pytest.raises(ConfigError):
        Settings.load(path)
