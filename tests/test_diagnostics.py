"""Tests for package warnings and logging setup."""

import logging

import pytest

from docfront.diagnostics import PackageWarning, WarningCollector
from docfront.logging_config import DATE_FORMAT, LOG_FORMAT, configure_logging
from docfront.model import Library, Package


@pytest.fixture
def library():
    lib = Library(name="mylib")
    Package(name="mypkg", libraries=[lib])
    return lib


class TestWarningCollector:
    """Reporting, ignoring and counting warnings."""

    def test_warning_is_logged_and_recorded(self, library, caplog):
        collector = WarningCollector()

        with caplog.at_level(logging.WARNING, logger="docfront"):
            collector.warn(library, PackageWarning.NO_LIBRARY_LEVEL_DOCS)

        assert collector.count() == 1
        record = collector.records[0]
        assert record.element is library
        assert record.message == "mylib has no library level documentation comments"
        assert "[no-library-level-docs]" in caplog.text

    def test_detail_is_appended(self, library):
        collector = WarningCollector()

        collector.warn(library, PackageWarning.DUPLICATE_FILE, detail="out/mylib.md")

        assert collector.records[0].message.endswith(": out/mylib.md")

    def test_ignored_warning_is_not_recorded(self, library, caplog):
        collector = WarningCollector(ignored=[PackageWarning.NO_LIBRARY_LEVEL_DOCS])

        with caplog.at_level(logging.DEBUG, logger="docfront"):
            collector.warn(library, PackageWarning.NO_LIBRARY_LEVEL_DOCS)

        assert collector.count() == 0
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]

    def test_count_by_kind(self, library):
        collector = WarningCollector()
        collector.warn(library, PackageWarning.NO_LIBRARY_LEVEL_DOCS)
        collector.warn(None, PackageWarning.DUPLICATE_FILE)
        collector.warn(None, PackageWarning.DUPLICATE_FILE)

        assert collector.count() == 3
        assert collector.count(PackageWarning.DUPLICATE_FILE) == 2
        assert collector.count(PackageWarning.NO_LIBRARY_LEVEL_DOCS) == 1

    def test_missing_element_is_named_unknown(self):
        collector = WarningCollector()

        collector.warn(None, PackageWarning.DUPLICATE_FILE)

        assert collector.records[0].message.startswith("<unknown>")


class TestConfigureLogging:
    """Console handler on the package logger."""

    @pytest.fixture(autouse=True)
    def restore_logger(self):
        logger = logging.getLogger("docfront")
        level, handlers = logger.level, list(logger.handlers)
        yield
        logger.setLevel(level)
        logger.handlers[:] = handlers

    def test_sets_level_and_formatter(self):
        logger = configure_logging("debug")

        assert logger.name == "docfront"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        formatter = logger.handlers[0].formatter
        assert formatter._fmt == LOG_FORMAT
        assert formatter.datefmt == DATE_FORMAT

    def test_reconfiguring_replaces_handler(self):
        configure_logging("INFO")
        logger = configure_logging("WARNING")

        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
