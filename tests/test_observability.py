"""
Tests for logging setup.
"""

import logging
from pathlib import Path

from enumgen.core.observability.logging_config import _parse_level, setup_logging, task_context


class TestParseLevel:
    def test_names(self):
        assert _parse_level("debug") == logging.DEBUG
        assert _parse_level("INFO") == logging.INFO

    def test_fallback(self):
        assert _parse_level(None) == logging.WARNING
        assert _parse_level("") == logging.WARNING
        assert _parse_level("chatty") == logging.WARNING


class TestSetupLogging:
    def test_console_only(self):
        setup_logging("INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert root.handlers[0].level == logging.INFO

    def test_replaces_handlers(self):
        setup_logging("INFO")
        setup_logging("DEBUG")
        assert len(logging.getLogger().handlers) == 1

    def test_file_handler(self, tmp_path: Path):
        log_file = tmp_path / "enumgen.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2

        logging.getLogger("enumgen.test").debug("written to file only")
        for handler in root.handlers:
            handler.flush()
        assert "written to file only" in log_file.read_text(encoding="utf-8")

        file_handler = root.handlers[1]
        root.removeHandler(file_handler)
        file_handler.close()


class TestTaskContext:
    def _log_to_file(self, tmp_path: Path, emit) -> str:
        log_file = tmp_path / "enumgen.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="INFO")
        emit(logging.getLogger("enumgen.test"))
        file_handler = logging.getLogger().handlers[1]
        file_handler.flush()
        logging.getLogger().removeHandler(file_handler)
        file_handler.close()
        return log_file.read_text(encoding="utf-8")

    def test_records_name_the_task(self, tmp_path: Path):
        def emit(logger):
            with task_context("bundle-lines"):
                logger.info("inside")
            logger.info("outside")

        text = self._log_to_file(tmp_path, emit)
        assert "[bundle-lines] enumgen.test:" in text
        assert "[-] enumgen.test:" in text

    def test_nested_contexts_restore(self, tmp_path: Path):
        def emit(logger):
            with task_context("bundle-lines"):
                with task_context("asset-enums"):
                    logger.info("inner")
                logger.info("outer")

        lines = self._log_to_file(tmp_path, emit).splitlines()
        assert "[asset-enums]" in lines[0] and lines[0].endswith("inner")
        assert "[bundle-lines]" in lines[1] and lines[1].endswith("outer")

    def test_run_task_is_attributed(self, i18n_dir: Path, tmp_path: Path):
        from enumgen.core.models.config import TaskConfig
        from enumgen.core.services.extractors import PropertiesExtractor
        from enumgen.core.use_cases.generate import run_task

        task = TaskConfig(target_package="com.example", src_directory=str(i18n_dir))

        def emit(logger):
            run_task(PropertiesExtractor(), task, tmp_path / "generated")

        text = self._log_to_file(tmp_path, emit)
        assert "[bundle-lines]" in text
        assert "Created enum class(es)" in text
