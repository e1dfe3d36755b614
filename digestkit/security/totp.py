"""
TOTP: time-based one-time passwords (RFC 6238).

The time step counter is T = floor((time - base) / step); the code is the
HOTP value for T. All times are integer seconds.
"""

from __future__ import annotations

import logging
import time as _time
from typing import Callable, Optional

from ..digests.base import HashFunction
from ..encoding import BytesLike, render_otp
from ..errors import InvalidParameter
from ..log_context import log_operation
from .hotp import hotp_value


logger = logging.getLogger(__name__)

DEFAULT_STEP = 30


def time_counter(time: int, base: int = 0, step: int = DEFAULT_STEP) -> int:
    if step <= 0:
        raise InvalidParameter("step_must_be_positive")
    if base < 0:
        raise InvalidParameter("base_must_be_non_negative")
    if time < base:
        raise InvalidParameter("time_before_base")
    return (int(time) - int(base)) // int(step)


def totp_value(
    hash_fn: HashFunction,
    secret: BytesLike,
    time: int,
    base: int = 0,
    step: int = DEFAULT_STEP,
    digits: int = 6,
) -> int:
    counter = time_counter(time, base, step)
    log_operation(logger, "totp", algorithm=hash_fn.name, step=step, base=base, counter=counter)
    return hotp_value(hash_fn, secret, counter, digits)


def totp(
    hash_fn: HashFunction,
    secret: BytesLike,
    time: int,
    base: int = 0,
    step: int = DEFAULT_STEP,
    digits: int = 6,
) -> str:
    return render_otp(totp_value(hash_fn, secret, time, base, step, digits), digits)


def totp_now(
    hash_fn: HashFunction,
    secret: BytesLike,
    base: int = 0,
    step: int = DEFAULT_STEP,
    digits: int = 6,
    clock: Optional[Callable[[], float]] = None,
) -> str:
    """
    TOTP for the current wall-clock second.
    """
    now = (clock or _time.time)()
    return totp(hash_fn, secret, int(now), base, step, digits)
