"""Tests for runtime settings, path resolution and the environment loader."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from ..config import SwitchSettings
from ..loader.env import EnvironmentLoader
from ..paths import PathResolver


class TestSwitchSettings:
    """Test cases for SwitchSettings."""

    def test_defaults_derive_from_home(self, home):
        """Test default locations under the home directory."""
        settings = SwitchSettings(home_dir=home)
        resolved = home.resolve()

        assert settings.home_dir == resolved
        assert settings.live_settings_path == resolved / ".claude" / "settings.json"
        assert settings.store_dir == resolved / ".cc-switch"
        assert settings.profiles_dir == resolved / ".cc-switch" / "profiles"
        assert settings.state_file == resolved / ".cc-switch" / "state.json"
        assert settings.profile_file_name == "settings.json"
        assert settings.log_level == "WARNING"

    def test_explicit_locations(self, tmp_path, home):
        """Test that explicit paths override the derived defaults."""
        settings = SwitchSettings(
            home_dir=home,
            live_settings_path=tmp_path / "live.json",
            store_dir=tmp_path / "store",
        )
        assert settings.live_settings_path == (tmp_path / "live.json").resolve()
        assert settings.state_file == (tmp_path / "store").resolve() / "state.json"

    def test_log_level_normalised(self, home):
        """Test that the log level is upper-cased."""
        assert SwitchSettings(home_dir=home, log_level=" debug ").log_level == "DEBUG"

    def test_unknown_field_rejected(self, home):
        """Test that unknown settings are rejected."""
        with pytest.raises(ValidationError):
            SwitchSettings(home_dir=home, colour="blue")

    def test_from_environment(self, tmp_path):
        """Test loading overrides from an explicit environment mapping."""
        environ = {
            "CC_SWITCH_HOME_DIR": str(tmp_path),
            "CC_SWITCH_STORE_DIR": str(tmp_path / "elsewhere"),
            "CC_SWITCH_LOG_LEVEL": "info",
            "CC_SWITCH_LOG_FILE": "",
            "UNRELATED": "x",
        }
        settings = SwitchSettings.from_environment(environ)

        assert settings.home_dir == tmp_path.resolve()
        assert settings.store_dir == (tmp_path / "elsewhere").resolve()
        assert settings.live_settings_path == tmp_path.resolve() / ".claude" / "settings.json"
        assert settings.log_level == "INFO"
        assert settings.log_file is None


class TestPathResolver:
    """Test cases for PathResolver."""

    def test_profile_locations(self, resolver, settings):
        """Test that a profile maps to a directory named exactly as the profile."""
        assert resolver.store_root == settings.profiles_dir
        assert resolver.profile_dir("work") == settings.profiles_dir / "work"
        assert resolver.profile_path("work") == settings.profiles_dir / "work" / "settings.json"
        assert resolver.state_path() == settings.state_file
        assert resolver.live_path() == settings.live_settings_path

    def test_deterministic(self, resolver):
        """Test that the same name always resolves to the same location."""
        assert resolver.profile_path("a") == resolver.profile_path("a")
        assert resolver.profile_dir("work") == resolver.profile_dir("work")

    @pytest.mark.parametrize(
        "names",
        [
            ["a", "A", "b"],
            ["work", "work2", "work-2", "work_2", "Work"],
            ["default", "staging", "prod", "dev-1", "dev_1", "x"],
        ],
    )
    def test_distinct_names_distinct_dirs(self, resolver, names):
        """Test that distinct valid names never share a directory."""
        dirs = [resolver.profile_dir(name) for name in names]
        assert len(set(dirs)) == len(names)
        assert len({resolver.profile_path(name) for name in names}) == len(names)

    def test_display_path_under_home(self, resolver):
        """Test home-relative rendering of the live path."""
        assert resolver.display_path(resolver.live_path()) == "~/.claude/settings.json"

    def test_display_path_outside_home(self, resolver, tmp_path):
        """Test that paths outside the home directory are shown in full."""
        outside = tmp_path / "other" / "file.json"
        assert resolver.display_path(outside) == str(outside)


class TestEnvironmentLoader:
    """Test cases for EnvironmentLoader."""

    def test_config_key_to_env_key(self):
        """Test conversion from settings key to variable name."""
        loader = EnvironmentLoader(environ={})
        assert loader._config_key_to_env_key("store_dir") == "CC_SWITCH_STORE_DIR"
        assert loader._config_key_to_env_key("log.level") == "CC_SWITCH_LOG_LEVEL"

    def test_load_with_schema(self):
        """Test schema-driven loading with defaults and blank values."""
        loader = EnvironmentLoader(
            prefix="TEST_",
            environ={"TEST_NAME": " value ", "TEST_EMPTY": "  "},
        )
        schema = {
            "name": {"type": "str"},
            "empty": {"type": "str"},
            "fallback": {"type": "str", "default": "dflt"},
            "missing": {"type": "str"},
        }
        assert loader.load_with_schema(schema) == {"name": "value", "fallback": "dflt"}

    def test_path_converter_expands_user(self):
        """Test that path values have ``~`` expanded."""
        loader = EnvironmentLoader(environ={"CC_SWITCH_STORE_DIR": "~/store"})
        config = loader.load_with_schema({"store_dir": {"type": "path"}})
        assert config == {"store_dir": str(Path("~/store").expanduser())}

    def test_unconvertible_value_skipped(self, caplog):
        """Test that a value with an unknown type is logged and ignored."""
        loader = EnvironmentLoader(environ={"CC_SWITCH_COUNT": "many"})

        with caplog.at_level("WARNING", logger="settings_switch.loader.env"):
            config = loader.load_with_schema({"count": {"type": "complex"}})

        assert config == {}
        assert "Ignoring CC_SWITCH_COUNT" in caplog.text
        assert "Unknown type: complex" in caplog.text
