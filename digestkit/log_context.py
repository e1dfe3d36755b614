from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional, Union

from .errors import InvalidParameter


_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_log_context(*, operation: str, extra: Optional[Dict[str, Any]] = None, **fields: Any) -> Dict[str, Any]:
    """
    Build a JSON-serializable dict for debug log lines.

    Byte values are replaced by their length so that keys, secrets and
    passwords never reach the logs.
    """
    d: Dict[str, Any] = {"op": operation}

    merged = dict(fields)
    if extra:
        merged.update(extra)

    for k, v in merged.items():
        if v is None:
            continue
        if isinstance(v, (bytes, bytearray, memoryview)):
            d[f"{k}_len"] = len(v)
        else:
            d[str(k)] = v

    return d


def encode_log_context(ctx: Dict[str, Any], max_len: int = 512) -> str:
    """
    Encode context as compact JSON string.
    If too long, truncate deterministically.
    """
    s = json.dumps(ctx, separators=(",", ":"), ensure_ascii=False, default=str)
    if len(s) <= max_len:
        return s
    return s[: max_len - 3] + "..."


def log_operation(logger: logging.Logger, operation: str, **fields: Any) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug(encode_log_context(build_log_context(operation=operation, **fields)))


def configure_logging(level: Union[str, int] = "WARNING") -> None:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            raise InvalidParameter(f"unknown_log_level:{level}")
        level = resolved
    logging.basicConfig(level=level, format=_LOG_FORMAT)
