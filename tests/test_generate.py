"""
Tests for the generate use case: the full scan → emit → write pipeline.
"""

import logging
from pathlib import Path

import pytest

from enumgen.core.errors import ConfigurationError, DirectoryNotFoundError, FileReadError
from enumgen.core.models.config import TaskConfig, ToolsConfig
from enumgen.core.models.template import GeneratedFile
from enumgen.core.services.extractors import AtlasExtractor, PropertiesExtractor
from enumgen.core.use_cases.generate import (
    create_asset_enums,
    create_bundle_lines,
    run_configured_task,
    run_task,
    write_files,
)


def _task(src: Path, **kwargs) -> TaskConfig:
    return TaskConfig(target_package="com.example.i18n", src_directory=str(src), **kwargs)


def _snapshot(root: Path) -> dict[str, bytes]:
    return {str(p.relative_to(root)): p.read_bytes() for p in sorted(root.rglob("*")) if p.is_file()}


class TestRunTask:
    def test_writes_one_module_per_bucket(self, i18n_dir: Path, tmp_path: Path):
        out = tmp_path / "generated"
        result = run_task(PropertiesExtractor(), _task(i18n_dir), out)

        package_dir = out / "com" / "example" / "i18n"
        assert result.output_directory == package_dir
        assert sorted(p.name for p in package_dir.iterdir()) == ["Game.py", "Menu.py"]
        assert result.buckets == ["Game", "Menu"]
        assert [f.path for f in result.files] == [
            "com/example/i18n/Game.py",
            "com/example/i18n/Menu.py",
        ]

        menu = (package_dir / "Menu.py").read_text(encoding="utf-8")
        assert "class Menu(Enum):" in menu
        assert "HELLO_WORLD = 'hello.world'" in menu
        assert "# Package: com.example.i18n" in menu
        assert "def nls(" in menu

    def test_idempotent(self, i18n_dir: Path, tmp_path: Path):
        out = tmp_path / "generated"
        run_task(PropertiesExtractor(), _task(i18n_dir), out)
        first = _snapshot(out)
        run_task(PropertiesExtractor(), _task(i18n_dir), out)
        assert _snapshot(out) == first

    def test_common_name(self, i18n_dir: Path, tmp_path: Path):
        out = tmp_path / "generated"
        result = run_task(PropertiesExtractor(), _task(i18n_dir, enum_class_name="Strings"), out)
        assert result.buckets == ["Strings"]
        source = (result.output_directory / "Strings.py").read_text(encoding="utf-8")
        for member in ("BYE", "GAME_OVER", "HELLO_WORLD", "SCORE"):
            assert f"    {member} = " in source

    def test_not_recursive(self, i18n_dir: Path, tmp_path: Path):
        result = run_task(
            PropertiesExtractor(),
            _task(i18n_dir.parent, include_sub_directories=False),
            tmp_path / "generated",
        )
        assert result.buckets == []
        assert result.files == []

    def test_atlas(self, atlas_dir: Path, tmp_path: Path):
        result = run_task(AtlasExtractor(), _task(atlas_dir), tmp_path / "generated")
        assert result.buckets == ["Skin"]
        source = (result.output_directory / "Skin.py").read_text(encoding="utf-8")
        assert "BUTTONUP = 'button up'" in source
        assert "CHECK_ON = 'check.on'" in source
        assert "def nls(" not in source

    def test_overwrites_existing_file(self, i18n_dir: Path, tmp_path: Path):
        out = tmp_path / "generated"
        stale = out / "com" / "example" / "i18n" / "Menu.py"
        stale.parent.mkdir(parents=True)
        stale.write_text("stale\n")
        run_task(PropertiesExtractor(), _task(i18n_dir), out)
        assert "stale" not in stale.read_text(encoding="utf-8")

    def test_warnings_are_collected(self, tmp_path: Path):
        src = tmp_path / "src"
        src.mkdir()
        (src / "menu.properties").write_text("42=x\nok=y\n")
        result = run_task(PropertiesExtractor(), _task(src), tmp_path / "generated")
        assert len(result.warnings) == 1
        assert "`42`" in result.warnings[0]

    def test_keyword_file_name_and_odd_keys(self, tmp_path: Path):
        src = tmp_path / "src"
        src.mkdir()
        (src / "none.properties").write_text("area\u00b2=m2\n_tip_=t\nbye=b\n", encoding="utf-8")
        result = run_task(PropertiesExtractor(), _task(src), tmp_path / "generated")

        assert result.buckets == ["None_"]
        source = (result.output_directory / "None_.py").read_text(encoding="utf-8")
        assert "class None_(Enum):" in source
        assert "AREA_ = 'area\u00b2'" in source
        assert "_TIP_" not in source
        assert len(result.warnings) == 1
        assert "`_tip_`" in result.warnings[0]
        compile(source, "None_.py", "exec")

    def test_summary_is_logged(self, i18n_dir: Path, tmp_path: Path, caplog):
        caplog.set_level(logging.INFO)
        run_task(PropertiesExtractor(), _task(i18n_dir), tmp_path / "generated")
        assert "Created enum class(es)" in caplog.text
        assert "  Game,\n  Menu" in caplog.text
        assert "in package com.example.i18n" in caplog.text

    def test_to_dict(self, i18n_dir: Path, tmp_path: Path):
        result = run_task(PropertiesExtractor(), _task(i18n_dir), tmp_path / "generated")
        data = result.to_dict()
        assert data["task"] == "bundle-lines"
        assert data["buckets"] == ["Game", "Menu"]
        assert data["source_directory"] == str(i18n_dir)
        assert data["warnings"] == []


class TestFailures:
    def test_missing_package(self, i18n_dir: Path, tmp_path: Path):
        task = TaskConfig(src_directory=str(i18n_dir))
        with pytest.raises(ConfigurationError, match="target_package is not set"):
            run_task(PropertiesExtractor(), task, tmp_path / "generated")

    def test_missing_source_directory_setting(self, tmp_path: Path):
        task = TaskConfig(target_package="com.example")
        with pytest.raises(ConfigurationError, match="no source directory"):
            run_task(PropertiesExtractor(), task, tmp_path / "generated")

    def test_source_directory_does_not_exist(self, tmp_path: Path):
        out = tmp_path / "generated"
        with pytest.raises(DirectoryNotFoundError):
            run_task(PropertiesExtractor(), _task(tmp_path / "missing"), out)
        assert not out.exists()

    def test_read_error_writes_nothing(self, i18n_dir: Path, tmp_path: Path):
        (i18n_dir / "broken.properties").write_bytes(b"key=\xff\xfe\n")
        out = tmp_path / "generated"
        with pytest.raises(FileReadError, match="broken.properties"):
            run_task(PropertiesExtractor(), _task(i18n_dir), out)
        assert not out.exists()


class TestTaskOperations:
    def _config(self, tmp_path: Path, **tasks) -> ToolsConfig:
        return ToolsConfig(
            generated_source_directory=str(tmp_path / "generated"),
            **tasks,
        )

    def test_create_bundle_lines(self, i18n_dir: Path, tmp_path: Path):
        config = self._config(tmp_path, create_bundle_lines=_task(i18n_dir))
        result = create_bundle_lines(config)
        assert result.buckets == ["Game", "Menu"]

    def test_create_asset_enums(self, atlas_dir: Path, tmp_path: Path):
        config = self._config(tmp_path, create_asset_enums=_task(atlas_dir))
        result = create_asset_enums(config)
        assert result.task == "asset-enums"
        assert (tmp_path / "generated" / "com" / "example" / "i18n" / "Skin.py").is_file()

    def test_unconfigured_task(self, tmp_path: Path):
        with pytest.raises(ConfigurationError):
            create_asset_enums(self._config(tmp_path))

    def test_unknown_task(self, tmp_path: Path):
        with pytest.raises(ConfigurationError, match="Unknown task"):
            run_configured_task(self._config(tmp_path), "sounds")


class TestWriteFiles:
    def test_creates_parent_directories(self, tmp_path: Path):
        files = [GeneratedFile(path="com/example/Menu.py", content="x\n")]
        assert write_files(files, tmp_path) == files
        assert (tmp_path / "com" / "example" / "Menu.py").read_text(encoding="utf-8") == "x\n"

    def test_keeps_existing_file_without_overwrite(self, tmp_path: Path):
        target = tmp_path / "Menu.py"
        target.write_text("edited\n", encoding="utf-8")
        files = [
            GeneratedFile(path="Menu.py", content="new\n", overwrite=False),
            GeneratedFile(path="Game.py", content="new\n", overwrite=False),
        ]
        written = write_files(files, tmp_path)
        assert [f.path for f in written] == ["Game.py"]
        assert target.read_text(encoding="utf-8") == "edited\n"

    def test_replaces_existing_file_with_overwrite(self, tmp_path: Path):
        target = tmp_path / "Menu.py"
        target.write_text("stale\n", encoding="utf-8")
        write_files([GeneratedFile(path="Menu.py", content="new\n")], tmp_path)
        assert target.read_text(encoding="utf-8") == "new\n"
