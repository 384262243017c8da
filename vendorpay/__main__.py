"""Run the service: ``python -m vendorpay [PORT]``."""

import argparse
import logging

import uvicorn

from vendorpay.config import settings


def parse_port(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"failed to parse provided port: {value!r}") from None
    if not 0 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"failed to parse provided port: {value!r}")
    return port


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vendorpay",
        description="Vendor whitelist and payment gateway",
    )
    parser.add_argument(
        "port",
        nargs="?",
        type=parse_port,
        default=settings.port,
        help=f"port to listen on (default: {settings.port})",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).debug(f"listening on {settings.host}:{args.port}")

    uvicorn.run(
        "vendorpay.main:app",
        host=settings.host,
        port=args.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
