"""Tests for paths and persisted settings."""

import json
from pathlib import Path

import pytest

from bajourney.config import (
    DEFAULT_LEARNER,
    JourneyPaths,
    Settings,
    detect_terminal_theme,
    is_valid_learner_name,
)


class TestJourneyPaths:
    """Tests for JourneyPaths layout."""

    def test_workspace_layout(self, tmp_path: Path) -> None:
        paths = JourneyPaths.for_workspace(tmp_path)
        assert paths.workspace_config == tmp_path / ".bajourney"
        assert paths.progress_file("ada") == (
            tmp_path / ".bajourney" / "learners" / "ada" / "progress.json"
        )
        assert paths.debug_log == tmp_path / ".bajourney" / "debug.log"

    def test_global_paths_follow_xdg(self, tmp_path: Path) -> None:
        paths = JourneyPaths.for_workspace(tmp_path)
        assert paths.global_settings == (
            tmp_path / "xdg-config" / "bajourney" / "settings.json"
        )

    @pytest.mark.parametrize("name", ["", ".", "..", "../x", "a/b", "a\\b"])
    def test_rejects_learner_outside_learners_dir(
        self, tmp_path: Path, name: str
    ) -> None:
        paths = JourneyPaths.for_workspace(tmp_path)
        assert not is_valid_learner_name(name)
        with pytest.raises(ValueError, match="Invalid learner name"):
            paths.progress_file(name)

    def test_accepts_plain_learner_name(self, tmp_path: Path) -> None:
        assert is_valid_learner_name("ada.lovelace")
        paths = JourneyPaths.for_workspace(tmp_path)
        assert paths.learner_dir("ada.lovelace").parent == paths.learners_dir

    def test_defaults_to_cwd(self, workspace: Path) -> None:
        assert JourneyPaths.for_workspace().workspace == workspace.resolve()


class TestSettings:
    """Tests for Settings persistence."""

    def test_defaults(self, tmp_path: Path) -> None:
        settings = Settings(JourneyPaths.for_workspace(tmp_path))
        assert settings.learner == DEFAULT_LEARNER
        assert settings.curriculum_path is None

    def test_values_persist(self, tmp_path: Path) -> None:
        paths = JourneyPaths.for_workspace(tmp_path)
        settings = Settings(paths)
        settings.learner = "ada"
        settings.theme = "textual-light"
        settings.curriculum_path = tmp_path / "course.yaml"

        reloaded = Settings(paths)
        assert reloaded.learner == "ada"
        assert reloaded.theme == "textual-light"
        assert reloaded.curriculum_path == (tmp_path / "course.yaml").resolve()

    def test_clear_curriculum_path(self, tmp_path: Path) -> None:
        paths = JourneyPaths.for_workspace(tmp_path)
        settings = Settings(paths)
        settings.curriculum_path = "course.yaml"
        settings.curriculum_path = None
        assert "curriculum_path" not in json.loads(paths.global_settings.read_text())

    def test_unreadable_file_is_ignored(self, tmp_path: Path) -> None:
        paths = JourneyPaths.for_workspace(tmp_path)
        paths.global_settings.parent.mkdir(parents=True)
        paths.global_settings.write_text("{broken")
        assert Settings(paths).learner == DEFAULT_LEARNER

    def test_instances_are_independent(self, tmp_path: Path) -> None:
        """Settings for different config homes do not share state."""
        one = Settings(JourneyPaths(workspace=tmp_path, _config_home=tmp_path / "a"))
        two = Settings(JourneyPaths(workspace=tmp_path, _config_home=tmp_path / "b"))
        one.learner = "ada"
        assert two.learner == DEFAULT_LEARNER


class TestDetectTerminalTheme:
    """Tests for terminal theme detection."""

    def test_light_background(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COLORFGBG", "0;15")
        assert detect_terminal_theme() == "textual-light"

    def test_dark_background(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COLORFGBG", "15;0")
        assert detect_terminal_theme() == "textual-dark"

    def test_default_dark(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("COLORFGBG", raising=False)
        assert detect_terminal_theme() == "textual-dark"
