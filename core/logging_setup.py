from __future__ import annotations
import logging


def parse_level(name: str | int) -> int:
    """Map a level name such as "debug" to its logging constant."""
    if isinstance(name, int):
        return name
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def setup_console_logging(level: str | int = logging.DEBUG) -> None:
    """
    Call once at app start. Prints quiz transitions to console.
    """
    level = parse_level(level)
    root = logging.getLogger()
    if root.handlers:
        # already configured (avoid duplicates)
        root.setLevel(level)
        return

    root.setLevel(level)
    h = logging.StreamHandler()
    fmt = logging.Formatter(
        "[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    h.setFormatter(fmt)
    root.addHandler(h)
