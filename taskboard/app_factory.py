"""ASGI entry point: ``uvicorn taskboard.app_factory:app``."""
from taskboard.app import create_app
from taskboard.core.config import get_settings
from taskboard.core.logging_setup import setup_logging

_settings = get_settings()
setup_logging(_settings.log_level, log_file=_settings.log_file or None)

app = create_app(_settings)

__all__ = ["app", "create_app"]
