"""Unit tests for infrastructure configuration getters."""

from pathlib import Path

import pytest

from infrastructure.config import (
    get_app_version,
    get_bcrypt_rounds,
    get_log_level,
    get_recipes_file,
    get_repository_backend,
    get_servings_bounds,
    get_users_file,
    seed_demo_recipes_enabled,
)


class TestConfig:
    """Test environment-driven configuration."""

    def test_defaults(self, monkeypatch):
        for name in (
            "REPOSITORY_BACKEND",
            "RECIPES_FILE",
            "USERS_FILE",
            "BCRYPT_ROUNDS",
            "SEED_DEMO_RECIPES",
            "SERVINGS_MIN",
            "SERVINGS_MAX",
            "LOG_LEVEL",
            "APP_VERSION",
        ):
            monkeypatch.delenv(name, raising=False)

        assert get_repository_backend() == "inmemory"
        assert get_recipes_file() == Path("./data/recipes.json")
        assert get_users_file() == Path("./data/users.json")
        assert get_bcrypt_rounds() == 12
        assert seed_demo_recipes_enabled() is True
        assert get_servings_bounds() == (1, 100)
        assert get_log_level() == "INFO"
        assert get_app_version() == "0.0.0-dev"

    def test_repository_backend_normalized(self, monkeypatch):
        monkeypatch.setenv("REPOSITORY_BACKEND", " JSONFile ")

        assert get_repository_backend() == "jsonfile"

    @pytest.mark.parametrize("value,expected", [("true", True), ("ON", True), ("0", False), ("no", False)])
    def test_seed_flag(self, monkeypatch, value, expected):
        monkeypatch.setenv("SEED_DEMO_RECIPES", value)

        assert seed_demo_recipes_enabled() is expected

    def test_servings_bounds_from_env(self, monkeypatch):
        monkeypatch.setenv("SERVINGS_MIN", "2")
        monkeypatch.setenv("SERVINGS_MAX", "24")

        assert get_servings_bounds() == (2, 24)

    def test_blank_bound_uses_default(self, monkeypatch):
        monkeypatch.setenv("SERVINGS_MIN", "")
        monkeypatch.setenv("SERVINGS_MAX", "12")

        assert get_servings_bounds() == (1, 12)

    @pytest.mark.parametrize(
        "low,high,message",
        [("0", "10", "at least 1"), ("8", "4", "cannot exceed"), ("one", "10", "SERVINGS_MIN")],
    )
    def test_invalid_servings_bounds(self, monkeypatch, low, high, message):
        monkeypatch.setenv("SERVINGS_MIN", low)
        monkeypatch.setenv("SERVINGS_MAX", high)

        with pytest.raises(ValueError, match=message):
            get_servings_bounds()

    def test_log_level_upper_cased(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert get_log_level() == "DEBUG"

    def test_users_file_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("USERS_FILE", str(tmp_path / "users.json"))

        assert get_users_file() == tmp_path / "users.json"

    @pytest.mark.parametrize("value", ["3", "32", "many"])
    def test_invalid_bcrypt_rounds(self, monkeypatch, value):
        monkeypatch.setenv("BCRYPT_ROUNDS", value)

        with pytest.raises(ValueError, match="BCRYPT_ROUNDS"):
            get_bcrypt_rounds()
