import logging
import sys

from combinum.runtime import current as _rt_current

ROOT_LOGGER = "combinum"


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        fmt = logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(fmt)
        root.addHandler(handler)
        root.propagate = False
        root.setLevel(logging.DEBUG if _rt_current().debug else logging.INFO)
    return logging.getLogger(name)


def configure_logging(debug: bool | None = None) -> logging.Logger:
    """Re-evaluate the package log level (BEHAVIOUR.DEBUG unless given)."""
    root = get_logger()
    if debug is None:
        debug = _rt_current().debug
    root.setLevel(logging.DEBUG if debug else logging.INFO)
    return root
