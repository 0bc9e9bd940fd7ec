import logging
import os
import sys

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


class _CategoryFilter(logging.Filter):
    def __init__(self, allowed: set[str]) -> None:
        super().__init__()
        self.allowed = allowed

    def filter(self, record: logging.LogRecord) -> bool:
        # record.name like: svg_carousel.carousel, svg_carousel.dir_loader
        parts = (record.name or "").split(".")
        suffix = parts[-1] if parts else record.name
        return suffix in self.allowed


_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"
_DATEFMT = "%H:%M:%S"


def _env_level(default: int) -> int:
    name = (os.getenv("SVG_CAROUSEL_LOG_LEVEL") or "").strip().lower()
    return _LEVELS.get(name, default)


def _env_categories() -> set[str]:
    raw = os.getenv("SVG_CAROUSEL_LOG_CATS") or ""
    return {c.strip() for c in raw.split(",") if c.strip()}


def _stderr_handler(logger: logging.Logger) -> logging.StreamHandler:
    """Return the handler writing to the current stderr, adding it if missing."""
    for h in logger.handlers:
        if isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr:
            return h
    handler = logging.StreamHandler(stream=sys.stderr)
    logger.addHandler(handler)
    return handler


def setup_logger(level: int = logging.INFO, name: str = "svg_carousel") -> logging.Logger:
    """Configure the project logger; safe to call repeatedly.

    SVG_CAROUSEL_LOG_LEVEL and SVG_CAROUSEL_LOG_CATS are read on every call, so
    running this again after the command line is parsed applies `--log-level`
    and `--log-cats`.
    """
    logger = logging.getLogger(name)
    logger.setLevel(_env_level(level))
    logger.propagate = False

    handler = _stderr_handler(logger)
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))
    handler.filters.clear()
    allowed = _env_categories()
    if allowed:
        handler.addFilter(_CategoryFilter(allowed))
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    base = setup_logger()
    return base if not name else base.getChild(name)
