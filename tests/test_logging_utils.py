"""Tests for the shared contact_sheet logger and verbosity switching."""
import io
import logging
from collections.abc import Callable
from pathlib import Path

import pytest

import contact_sheet.logging_utils as cs_logging_utils
import contact_sheet.pipeline as cs_pipeline
from contact_sheet.config import ContactSheetConfig


class TestSetupLogger:
    def test_repeated_setup_keeps_one_handler(self) -> None:
        first = cs_logging_utils.setup_logger("contact_sheet.test_repeat")
        second = cs_logging_utils.setup_logger("contact_sheet.test_repeat")
        assert first is second
        assert len(first.handlers) == 1
        assert first.propagate is False

    def test_default_format(self) -> None:
        stream = io.StringIO()
        named = cs_logging_utils.setup_logger(
            "contact_sheet.test_format",
            handler=logging.StreamHandler(stream),
        )
        named.warning("Skipping %s", "a.png")
        assert "[WARNING] Skipping a.png" in stream.getvalue()

    def test_custom_formatter(self) -> None:
        stream = io.StringIO()
        named = cs_logging_utils.setup_logger(
            "contact_sheet.test_custom",
            formatter=logging.Formatter("[SHEET] %(message)s"),
            handler=logging.StreamHandler(stream),
        )
        named.info("saved")
        assert stream.getvalue() == "[SHEET] saved\n"

    def test_shared_logger_name(self) -> None:
        assert cs_logging_utils.logger.name == "contact_sheet"


class TestVerbosity:
    def test_set_verbosity_toggles_debug(self) -> None:
        shared = cs_logging_utils.logger
        try:
            cs_logging_utils.set_verbosity(verbose=True)
            assert shared.level == logging.DEBUG
        finally:
            cs_logging_utils.set_verbosity(verbose=False)
        assert shared.level == logging.INFO

    @pytest.mark.parametrize("verbose", [True, False])
    def test_per_file_messages_follow_verbosity(
        self,
        verbose: bool,  # noqa: FBT001
        tmp_path: Path,
        make_image_file: Callable[..., Path],
        make_config: Callable[..., ContactSheetConfig],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        make_image_file("photos/a.png")
        caplog.set_level(logging.DEBUG)
        try:
            cs_logging_utils.set_verbosity(verbose=verbose)
            cs_pipeline.build_contact_sheet(
                [tmp_path / "photos"], make_config(),
            )
        finally:
            cs_logging_utils.set_verbosity(verbose=False)

        assert ("Start for" in caplog.text) is verbose
        assert "saved to" in caplog.text
