"""Custom exceptions."""


class KintaiError(Exception):
    """Base exception for kintai."""


class InvalidDateError(KintaiError, ValueError):
    """Raised when a year/month/day triple is not a real calendar date."""


class MalformedTimeError(KintaiError, ValueError):
    """Raised when a time string is not in HH:MM form."""


class ConfigError(KintaiError):
    """Raised when configuration is present but unreadable or incomplete."""


class TimesNotAllowedError(KintaiError):
    """Raised when clock times are entered on a day whose kind does not take them."""
