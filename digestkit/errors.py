from __future__ import annotations


class DigestkitError(Exception):
    pass


class InvalidParameter(DigestkitError, ValueError):
    """
    Caller-input error, raised before any computation starts.

    The message is a short snake_case reason, optionally followed by ":detail",
    e.g. "digits_must_be_positive" or "unknown_hash_algorithm:sha3".
    """


class ConfigError(DigestkitError):
    pass
