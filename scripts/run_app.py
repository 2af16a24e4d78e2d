import argparse
from pathlib import Path

import uvicorn

from api import config
from core.logging_setup import parse_level


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Quiz server")
    parser.add_argument("--host", default=config.HOST)
    parser.add_argument("--port", type=int, default=config.PORT)
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="Path to a JSON question catalog",
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    if args.catalog is not None:
        config.CATALOG_FILE = args.catalog

    uvicorn.run(
        "api.app:app",
        host=args.host,
        port=args.port,
        log_level=parse_level(args.log_level),
    )


if __name__ == "__main__":
    main()
