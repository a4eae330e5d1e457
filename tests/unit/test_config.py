"""Unit tests for settings models and logging setup."""

import json
import logging

import pytest
import structlog
from pydantic import ValidationError

from kerfcad.config import (
    ArcOptions,
    CircleOptions,
    ExportConfig,
    KerfCadSettings,
    LoggingConfig,
    RectangleOptions,
    WaveOptions,
    get_default_settings,
)
from kerfcad.utils import DrawingLogger, configure_logging, get_logger


@pytest.fixture
def restore_logging():
    """Undo global logging changes made by configure_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    structlog.reset_defaults()


class TestSettings:
    """Tests for pydantic settings models."""

    def test_defaults(self):
        """Test default generator and export settings."""
        settings = get_default_settings()
        assert settings.wave.resolution == 90
        assert settings.arc.degrees == 90.0
        assert settings.arc.proportion == 1.0
        assert settings.circle.resolution == 360
        assert settings.circle.centers == [(0.0, 0.0)]
        assert settings.export.precision == 4
        assert settings.export.newline == "\r\n"
        assert settings.logging.log_file is None

    def test_nested_override(self):
        """Test building settings from plain dictionaries."""
        settings = KerfCadSettings.model_validate({"export": {"precision": 2}, "arc": {"degrees": -45}})
        assert settings.export.precision == 2
        assert settings.export.unit == "mm"
        assert settings.arc.degrees == -45.0

    @pytest.mark.parametrize(
        ("model", "values"),
        [
            (WaveOptions, {"resolution": 1}),
            (ArcOptions, {"proportion": 0.0}),
            (ArcOptions, {"proportion": 1.5}),
            (CircleOptions, {"centers": []}),
            (RectangleOptions, {"radius": -1.0}),
            (RectangleOptions, {"resolution": -1}),
            (ExportConfig, {"precision": -1}),
        ],
    )
    def test_validation(self, model, values):
        """Test that out-of-range options are rejected."""
        with pytest.raises(ValidationError):
            model.model_validate(values)

    def test_corner_resolution(self):
        """Test the derived per-corner sample count."""
        assert RectangleOptions(radius=1.0).corner_resolution(10.0, 5.0) == 90
        assert RectangleOptions(radius=20.0).corner_resolution(-10.0, 5.0) == 180
        assert RectangleOptions(radius=1.0).corner_resolution(0.0, 0.0) == 90
        assert RectangleOptions(radius=1.0, resolution=7).corner_resolution(10.0, 5.0) == 7


class TestLogging:
    """Tests for structured logging helpers."""

    def test_configure_logging_to_file(self, tmp_path, restore_logging):
        """Test that the log file receives JSON events."""
        log_file = tmp_path / "kerfcad.log"
        settings = KerfCadSettings(logging=LoggingConfig(log_file=log_file))
        logger = configure_logging(settings.logging, quiet=True)
        logger.info("Test event", answer=42)

        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert any("Logging initialized" in line for line in lines)
        payload = json.loads(lines[-1].split(" | ")[-1])
        assert payload["event"] == "Test event"
        assert payload["answer"] == 42

    def test_configure_logging_without_file(self, restore_logging):
        """Test that only a console handler is added without a log file."""
        before = len(logging.getLogger().handlers)
        configure_logging(LoggingConfig(log_level="ERROR"))
        added = logging.getLogger().handlers[before:]
        assert len(added) == 1
        assert added[0].level == logging.ERROR

    def test_configure_logging_defaults(self, restore_logging):
        """Test that without a config only a WARNING console handler is added."""
        before = len(logging.getLogger().handlers)
        configure_logging()
        added = logging.getLogger().handlers[before:]
        assert [handler.level for handler in added] == [logging.WARNING]

    def test_file_level_from_config(self, tmp_path, restore_logging):
        """Test that the file handler uses the configured file level."""
        log_file = tmp_path / "kerfcad.log"
        configure_logging(LoggingConfig(log_file=log_file, file_log_level="info"), quiet=True)
        get_logger("kerfcad.test").debug("Hidden event")
        get_logger("kerfcad.test").info("Shown event")
        text = log_file.read_text(encoding="utf-8")
        assert "Shown event" in text
        assert "Hidden event" not in text

    def test_drawing_logger_stats(self, caplog):
        """Test that DrawingLogger counts events and logs them."""
        caplog.set_level(logging.DEBUG, logger="kerfcad.test")
        log = DrawingLogger(get_logger("kerfcad.test"))
        log.log_feature("tooth", 12, (1.0, 2.0))
        log.log_feature("tooth", 12, (3.0, 2.0))
        log.log_break(4)
        log.log_rotation(1.5, 3, 9)
        log.log_merge(10, (0.0, 0.0))
        log.log_export("out.svg", 2)
        log.log_export_error("bad.svg", OSError("nope"))

        stats = log.stats
        assert stats.features["tooth"] == 2
        assert stats.feature_count == 2
        assert (stats.breaks, stats.rotations, stats.merges, stats.exports) == (1, 1, 1, 1)
        assert "Drawing export failed" in caplog.text
        assert "OSError" in caplog.text

    def test_silent_without_handlers(self, caplog):
        """Test that debug events are filtered when the level is not enabled."""
        caplog.set_level(logging.WARNING, logger="kerfcad.quiet")
        DrawingLogger(get_logger("kerfcad.quiet")).log_feature("line", 2, (0.0, 0.0))
        assert "Feature drawn" not in caplog.text
