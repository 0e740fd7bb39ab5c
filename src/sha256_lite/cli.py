"""sha256-lite CLI entry point.

Usage: uv run sha256-lite [command]
"""
import argparse
import logging
import sys

log = logging.getLogger(__name__)


def _add_input_arguments(p: argparse.ArgumentParser) -> None:
    src = p.add_mutually_exclusive_group()
    src.add_argument(
        "text", nargs="?", default=None,
        help="Message text, encoded as UTF-8. Reads stdin if no input is given.",
    )
    src.add_argument("--file", help="Read the message from a file.")
    src.add_argument("--hex", dest="hex_input", help="Message as a hex string.")


def _add_key_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("--key", required=True, help="HMAC key (UTF-8 text).")
    p.add_argument(
        "--key-hex", action="store_true",
        help="Interpret --key as a hex string instead of text.",
    )


def _add_hash_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser("hash", help="Print the SHA-256 hex digest.")
    _add_input_arguments(p)


def _add_hmac_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser("hmac", help="Print the HMAC-SHA256 hex tag.")
    _add_key_arguments(p)
    _add_input_arguments(p)


def _add_verify_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "verify",
        help="Check an HMAC-SHA256 tag. Exit status 0 on match, 1 on mismatch.",
    )
    _add_key_arguments(p)
    p.add_argument("--tag", required=True, help="Received tag as a hex string.")
    _add_input_arguments(p)


def _add_profile_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "profile",
        help="Benchmark against hashlib and cross-check every digest.",
    )
    p.add_argument(
        "--sizes", type=int, nargs="+", default=[0, 64, 1024, 16384],
        help="Message sizes in bytes (default: 0 64 1024 16384)",
    )
    p.add_argument(
        "--iterations", type=int, default=20,
        help="Messages hashed per size (default: 20)",
    )
    p.add_argument(
        "--seed", type=int, default=42,
        help="RNG seed for reproducible runs (default: 42)",
    )
    p.add_argument(
        "--cprofile", action="store_true",
        help="Enable cProfile and print top functions by cumulative time.",
    )


def _parse_hex(parser: argparse.ArgumentParser, value: str, what: str) -> bytes:
    try:
        return bytes.fromhex(value)
    except ValueError:
        parser.error(f"{what} is not valid hex: {value!r}")


def _read_message(parser: argparse.ArgumentParser, args: argparse.Namespace) -> bytes:
    if args.hex_input is not None:
        return _parse_hex(parser, args.hex_input, "--hex")
    if args.file is not None:
        try:
            with open(args.file, "rb") as f:
                return f.read()
        except OSError as exc:
            parser.error(f"cannot read {args.file}: {exc.strerror}")
    if args.text is not None:
        return args.text.encode("utf-8")
    return sys.stdin.buffer.read()


def _read_key(parser: argparse.ArgumentParser, args: argparse.Namespace) -> bytes:
    if args.key_hex:
        return _parse_hex(parser, args.key, "--key")
    return args.key.encode("utf-8")


def _run_hash(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    from sha256_lite.digest.sha256 import sha256_hex

    print(sha256_hex(_read_message(parser, args)))
    return 0


def _run_hmac(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    from sha256_lite.crypto.mac import hmac_sha256_hex

    key = _read_key(parser, args)
    print(hmac_sha256_hex(_read_message(parser, args), key))
    return 0


def _run_verify(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    from sha256_lite.crypto.verifier import verify_hmac

    key = _read_key(parser, args)
    tag = _parse_hex(parser, args.tag, "--tag")
    if verify_hmac(_read_message(parser, args), tag, key):
        print("OK")
        return 0
    print("MISMATCH")
    return 1


def _run_profile(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    from sha256_lite.profiling.harness import run_benchmark
    from sha256_lite.profiling.report import format_report

    try:
        result = run_benchmark(
            sizes=tuple(args.sizes),
            iterations=args.iterations,
            seed=args.seed,
            profile=args.cprofile,
        )
    except ValueError as exc:
        parser.error(str(exc))
    print(format_report(result))
    if result.cprofile_stats:
        print()
        print("--- cProfile top functions ---")
        print(result.cprofile_stats)
    return 0 if result.all_match else 1


_COMMANDS = {
    "hash": _run_hash,
    "hmac": _run_hmac,
    "verify": _run_verify,
    "profile": _run_profile,
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sha256-lite",
        description="SHA-256 and HMAC-SHA256 -- pure Python, zero dependencies.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log at DEBUG level.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_hash_parser(subparsers)
    _add_hmac_parser(subparsers)
    _add_verify_parser(subparsers)
    _add_profile_parser(subparsers)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        return 0

    log.debug("Running %s", args.command)
    return _COMMANDS[args.command](parser, args)


if __name__ == "__main__":
    sys.exit(main())
