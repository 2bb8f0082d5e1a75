"""Logger helpers shared by the library and the CLI."""
from __future__ import annotations

import logging

ROOT_LOGGER = "cssbuilder"


def get_logger(name: str = "") -> logging.Logger:
    """Return the ``cssbuilder`` logger, or a named child of it."""
    if not name:
        return logging.getLogger(ROOT_LOGGER)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(level: str = "WARNING", *, verbose: bool = False) -> None:
    """Install a stderr handler. Only the CLI calls this."""
    resolved = logging.DEBUG if verbose else getattr(logging, level.upper(), None)
    if not isinstance(resolved, int):
        resolved = logging.WARNING
    logging.basicConfig(
        level=resolved,
        format="%(levelname)s %(name)s: %(message)s",
    )
    get_logger().setLevel(resolved)
