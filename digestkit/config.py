from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import yaml

from .digests import get_hash_function
from .errors import ConfigError, InvalidParameter


CONFIG_ENV_VAR = "DIGESTKIT_CONFIG"
DEFAULT_CONFIG_PATH = "config.yaml"


@dataclass
class OtpConfig:
    algorithm: str = "sha1"
    digits: int = 6
    step: int = 30
    base: int = 0


@dataclass
class Pbkdf2Config:
    algorithm: str = "sha256"
    iterations: int = 200_000
    length: int = 32


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class AppConfig:
    otp: OtpConfig = field(default_factory=OtpConfig)
    pbkdf2: Pbkdf2Config = field(default_factory=Pbkdf2Config)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _resolve_path(path: Optional[str]) -> Optional[str]:
    if path:
        return path
    env = (os.environ.get(CONFIG_ENV_VAR) or "").strip()
    if env:
        return env
    if os.path.isfile(DEFAULT_CONFIG_PATH):
        return DEFAULT_CONFIG_PATH
    return None


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = raw.get(name, {}) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"config_section_not_a_mapping:{name}")
    return value


def validate_config(cfg: AppConfig) -> AppConfig:
    get_hash_function(cfg.otp.algorithm)
    get_hash_function(cfg.pbkdf2.algorithm)
    if cfg.otp.digits <= 0:
        raise InvalidParameter("digits_must_be_positive")
    if cfg.otp.step <= 0:
        raise InvalidParameter("step_must_be_positive")
    if cfg.otp.base < 0:
        raise InvalidParameter("base_must_be_non_negative")
    if cfg.pbkdf2.iterations <= 0:
        raise InvalidParameter("iterations_must_be_positive")
    if cfg.pbkdf2.length <= 0:
        raise InvalidParameter("dk_len_must_be_positive")
    return cfg


def load_config(path: Optional[str] = None) -> AppConfig:
    """
    Load settings from YAML.

    Resolution order: explicit path, $DIGESTKIT_CONFIG, ./config.yaml.
    With none of them present the built-in defaults are returned.
    """
    resolved = _resolve_path(path)
    if resolved is None:
        return validate_config(AppConfig())

    try:
        with open(resolved, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"config_unreadable:{resolved}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"config_invalid_yaml:{resolved}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"config_not_a_mapping:{resolved}")

    otp = _section(raw, "otp")
    kdf = _section(raw, "pbkdf2")
    log = _section(raw, "logging")

    try:
        cfg = AppConfig(
            otp=OtpConfig(
                algorithm=str(otp.get("algorithm", "sha1")),
                digits=int(otp.get("digits", 6)),
                step=int(otp.get("step", 30)),
                base=int(otp.get("base", 0)),
            ),
            pbkdf2=Pbkdf2Config(
                algorithm=str(kdf.get("algorithm", "sha256")),
                iterations=int(kdf.get("iterations", 200_000)),
                length=int(kdf.get("length", 32)),
            ),
            logging=LoggingConfig(
                level=str(log.get("level", "WARNING")),
            ),
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"config_bad_value:{e}") from e

    return validate_config(cfg)
