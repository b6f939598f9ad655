"""Configuration management."""

import configparser
import os
from dataclasses import dataclass
from pathlib import Path

from kintai.duration import Duration
from kintai.errors import ConfigError

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "kintai" / "config.ini"


@dataclass(frozen=True)
class Settings:
    """Wage and standard shift settings used by the payroll calculation."""

    wage_yen: int = 1500
    break_minutes: int = 60
    standard_start: Duration = Duration.parse("09:30")
    standard_end: Duration = Duration.parse("18:30")
    standard_work_minutes: int = 8 * 60
    overtime_multiplier: float = 1.25

    @classmethod
    def from_env(cls) -> "Settings | None":
        """Load settings from environment variables."""
        if "KINTAI_WAGE_YEN" not in os.environ:
            return None
        try:
            return cls(
                wage_yen=int(os.environ["KINTAI_WAGE_YEN"]),
                break_minutes=int(os.environ.get("KINTAI_BREAK_MINUTES", "60")),
                standard_start=Duration.parse(os.environ.get("KINTAI_STANDARD_START", "09:30")),
                standard_end=Duration.parse(os.environ.get("KINTAI_STANDARD_END", "18:30")),
            )
        except ValueError as e:
            msg = f"Invalid KINTAI_* environment settings: {e}"
            raise ConfigError(msg) from e

    @classmethod
    def load(cls, path: Path = DEFAULT_CONFIG_PATH) -> "Settings | None":
        """Load settings from file."""
        if not path.is_file():
            return None

        config = configparser.ConfigParser(interpolation=None)
        try:
            config.read(path)
            section = config["kintai"]
            return cls(
                wage_yen=int(section["wageYen"]),
                break_minutes=int(section["breakMinutes"]),
                standard_start=Duration.parse(section["standardStart"]),
                standard_end=Duration.parse(section["standardEnd"]),
            )
        except KeyError as e:
            msg = f"Missing {e} in config file {path}"
            raise ConfigError(msg) from e
        except (ValueError, configparser.Error) as e:
            msg = f"Invalid config file {path}: {e}"
            raise ConfigError(msg) from e

    @classmethod
    def resolve(cls, path: Path = DEFAULT_CONFIG_PATH) -> "Settings":
        """Settings from the environment, then the config file, then defaults."""
        return cls.from_env() or cls.load(path) or cls()

    def save(self, path: Path = DEFAULT_CONFIG_PATH) -> None:
        """Save settings to file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        config = configparser.ConfigParser(interpolation=None)
        config["kintai"] = {
            "wageYen": str(self.wage_yen),
            "breakMinutes": str(self.break_minutes),
            "standardStart": str(self.standard_start),
            "standardEnd": str(self.standard_end),
        }
        with path.open("w") as config_file:
            config.write(config_file)


DEFAULT_SETTINGS = Settings()
