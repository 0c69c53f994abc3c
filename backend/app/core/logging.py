"""
Logging setup shared by the API process.
"""
import logging

from app.config import get_settings


def setup_logging() -> None:
    """Configure the root logger from settings."""
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
