from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import AppConfig, load_config
from .digests import available_algorithms, get_hash_function
from .digests.files import digest_file_hex
from .encoding import bytes_to_hex
from .errors import DigestkitError
from .log_context import configure_logging
from .security import hmac_hex, hotp, pbkdf2_hmac, totp, totp_now
from .selftest import run_selftest


def _print(title: str) -> None:
    print("\n" + "=" * 80)
    print(title)
    print("=" * 80)


def _cmd_digest(args: argparse.Namespace, cfg: AppConfig) -> int:
    if args.file:
        print(digest_file_hex(args.file, args.algorithm))
        return 0
    if args.text is None:
        print("error: give TEXT or --file", file=sys.stderr)
        return 2
    print(get_hash_function(args.algorithm).hex(args.text))
    return 0


def _cmd_hmac(args: argparse.Namespace, cfg: AppConfig) -> int:
    print(hmac_hex(get_hash_function(args.algorithm), args.key, args.message))
    return 0


def _cmd_pbkdf2(args: argparse.Namespace, cfg: AppConfig) -> int:
    algorithm = args.algorithm or cfg.pbkdf2.algorithm
    iterations = args.iterations if args.iterations is not None else cfg.pbkdf2.iterations
    length = args.length if args.length is not None else cfg.pbkdf2.length
    dk = pbkdf2_hmac(get_hash_function(algorithm), args.password, args.salt, iterations, length)
    print(bytes_to_hex(dk))
    return 0


def _cmd_hotp(args: argparse.Namespace, cfg: AppConfig) -> int:
    algorithm = args.algorithm or cfg.otp.algorithm
    digits = args.digits if args.digits is not None else cfg.otp.digits
    print(hotp(get_hash_function(algorithm), args.secret, args.counter, digits))
    return 0


def _cmd_totp(args: argparse.Namespace, cfg: AppConfig) -> int:
    hash_fn = get_hash_function(args.algorithm or cfg.otp.algorithm)
    digits = args.digits if args.digits is not None else cfg.otp.digits
    base = args.base if args.base is not None else cfg.otp.base
    step = args.step if args.step is not None else cfg.otp.step
    if args.time is None:
        print(totp_now(hash_fn, args.secret, base, step, digits))
    else:
        print(totp(hash_fn, args.secret, args.time, base, step, digits))
    return 0


def _cmd_selftest(args: argparse.Namespace, cfg: AppConfig) -> int:
    _print("Known-answer self test")
    results = run_selftest()
    for r in results:
        status = "ok  " if r.ok else "FAIL"
        print(f"[{status}] {r.name}")
        if not r.ok:
            print(f"       expected {r.expected}")
            print(f"       actual   {r.actual}")
    failed = sum(1 for r in results if not r.ok)
    print(f"\n{len(results) - failed}/{len(results)} checks passed")
    return 1 if failed else 0


def build_parser() -> argparse.ArgumentParser:
    algorithms = ", ".join(available_algorithms())

    parser = argparse.ArgumentParser(prog="digestkit", description="Message digests, HMAC, PBKDF2 and one-time passwords")
    parser.add_argument("--config", help="YAML config file (default: $DIGESTKIT_CONFIG or ./config.yaml)")
    parser.add_argument("--log-level", dest="log_level", help="Logging level, overrides the config file")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("digest", help="Print the hex digest of TEXT or a file")
    p.add_argument("algorithm", help=f"One of: {algorithms}")
    p.add_argument("text", nargs="?", help="Text to hash (UTF-8)")
    p.add_argument("--file", help="Hash this file instead of TEXT")
    p.set_defaults(func=_cmd_digest)

    p = sub.add_parser("hmac", help="Print the hex HMAC of MESSAGE under KEY")
    p.add_argument("algorithm", help=f"One of: {algorithms}")
    p.add_argument("key")
    p.add_argument("message")
    p.set_defaults(func=_cmd_hmac)

    p = sub.add_parser("pbkdf2", help="Derive a key with PBKDF2-HMAC")
    p.add_argument("password")
    p.add_argument("salt")
    p.add_argument("--algorithm", help="Hash for the HMAC PRF")
    p.add_argument("--iterations", type=int)
    p.add_argument("--length", type=int, help="Derived key length in bytes")
    p.set_defaults(func=_cmd_pbkdf2)

    p = sub.add_parser("hotp", help="Counter-based one-time password (RFC 4226)")
    p.add_argument("secret")
    p.add_argument("counter", type=int)
    p.add_argument("--algorithm")
    p.add_argument("--digits", type=int)
    p.set_defaults(func=_cmd_hotp)

    p = sub.add_parser("totp", help="Time-based one-time password (RFC 6238)")
    p.add_argument("secret")
    p.add_argument("--time", type=int, help="UNIX time in seconds (default: now)")
    p.add_argument("--base", type=int)
    p.add_argument("--step", type=int)
    p.add_argument("--algorithm")
    p.add_argument("--digits", type=int)
    p.set_defaults(func=_cmd_totp)

    p = sub.add_parser("selftest", help="Run the known-answer tests")
    p.set_defaults(func=_cmd_selftest)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = load_config(args.config)
        configure_logging(args.log_level or cfg.logging.level)
        return args.func(args, cfg)
    except (DigestkitError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
