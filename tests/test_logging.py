"""
Logging Configuration Tests

Run: pytest tests/test_logging.py
"""

import logging

from app.core.config import settings
from app.core.logging import SERVICE_PACKAGES, configure_logging


def test_service_packages_use_service_level(monkeypatch):
    monkeypatch.setattr(settings, "log_level", "DEBUG")
    monkeypatch.setattr(settings, "library_log_level", "ERROR")

    configure_logging()

    assert logging.getLogger().level == logging.ERROR
    for package in SERVICE_PACKAGES:
        assert logging.getLogger(package).level == logging.DEBUG
    assert logging.getLogger("store.employee_store").getEffectiveLevel() == logging.DEBUG
    assert logging.getLogger("httpx").getEffectiveLevel() == logging.ERROR
    assert len(logging.getLogger().handlers) == 1
