import os

from loguru import logger

from motdtext.dialect import Dialect


def _default_dialect() -> Dialect:
    raw = os.environ.get("MOTDTEXT_DEFAULT_DIALECT", "auto")
    dialect = Dialect.from_name(raw)
    if dialect is None:
        logger.warning(f"Unknown MOTDTEXT_DEFAULT_DIALECT={raw!r}, using auto-detection")
        return Dialect.AUTO
    return dialect


DEFAULT_DIALECT = _default_dialect()

LOG_LEVEL = os.environ.get("MOTDTEXT_LOG_LEVEL", "WARNING").upper()
