from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .classes.controller import register as register_classes
from .container import build_container
from .core.logging_config import setup_logging
from .reports.controller import register as register_reports
from .reports.sharing import ShareTarget
from .students.controller import register as register_students

logger = logging.getLogger(__name__)


def create_app(
    settings_module: Optional[str] = None,
    *,
    share_target: Optional[ShareTarget] = None,
    export_dir: Optional[str] = None,
) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    data_file = getattr(settings, "DATA_FILE")
    export_dir = export_dir or getattr(settings, "EXPORT_DIR", None)

    setup_logging(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        log_dir=getattr(settings, "LOG_DIR", None),
    )
    logger.info("Starting with settings=%s data_file=%s export_dir=%s", settings_module, data_file, export_dir)

    container = build_container(data_file=data_file, export_dir=export_dir, share_target=share_target)

    register_classes(app, container)
    register_students(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
