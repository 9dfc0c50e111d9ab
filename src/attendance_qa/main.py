from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .validation.controller import register as register_validation

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(settings) -> None:
    logging.basicConfig(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )


def load_settings():
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())


def create_app(settings=None) -> Flask:
    if settings is None:
        settings = load_settings()
    configure_logging(settings)

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if app.config["DEBUG"]:
        logger.info(
            "settings=%s auto_fix=%s throw_on_error=%s",
            getattr(settings, "__name__", type(settings).__name__),
            getattr(settings, "VALIDATION_AUTO_FIX", True),
            getattr(settings, "VALIDATION_THROW_ON_ERROR", False),
        )

    container = build_container(settings=settings)
    register_validation(app, container)

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(debug=app.config["DEBUG"])
