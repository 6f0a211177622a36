"""Configuration utilities for infrastructure layer."""

import os
from pathlib import Path


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def get_repository_backend() -> str:
    """
    Get persistence backend for recipes and users.

    Returns:
        Lower-cased REPOSITORY_BACKEND env var ("inmemory" or "jsonfile"),
        defaults to "inmemory"
    """
    return os.getenv("REPOSITORY_BACKEND", "inmemory").strip().lower()


def get_recipes_file() -> Path:
    """
    Get path of the JSON recipe store.

    Returns:
        Path from RECIPES_FILE env var, defaults to ./data/recipes.json
    """
    return Path(os.getenv("RECIPES_FILE", "./data/recipes.json"))


def get_users_file() -> Path:
    """
    Get path of the JSON user and session store.

    Returns:
        Path from USERS_FILE env var, defaults to ./data/users.json
    """
    return Path(os.getenv("USERS_FILE", "./data/users.json"))


def get_bcrypt_rounds() -> int:
    """
    Get the bcrypt cost factor used for new password hashes.

    Environment Variables:
        BCRYPT_ROUNDS: Log2 work factor (default 12, bcrypt accepts 4..31)

    Raises:
        ValueError: If the value is not an integer in 4..31
    """
    rounds = _int_env("BCRYPT_ROUNDS", 12)
    if not 4 <= rounds <= 31:
        raise ValueError(f"BCRYPT_ROUNDS must be between 4 and 31, got {rounds}")
    return rounds


def seed_demo_recipes_enabled() -> bool:
    """
    Whether the in-memory store starts with the demo recipes.

    SEED_DEMO_RECIPES accepts 1/true/yes/on (case-insensitive), default on.
    """
    return os.getenv("SEED_DEMO_RECIPES", "1").strip().lower() in ("1", "true", "yes", "on")


def get_servings_bounds() -> tuple[int, int]:
    """
    Get the servings range accepted by the API.

    Requested servings are clamped into this range before scaling.

    Environment Variables:
        SERVINGS_MIN: Lower bound (default 1)
        SERVINGS_MAX: Upper bound (default 100)

    Raises:
        ValueError: If a bound is not an integer, SERVINGS_MIN < 1 or
            SERVINGS_MIN > SERVINGS_MAX
    """
    low = _int_env("SERVINGS_MIN", 1)
    high = _int_env("SERVINGS_MAX", 100)

    if low < 1:
        raise ValueError(f"SERVINGS_MIN must be at least 1, got {low}")
    if low > high:
        raise ValueError(f"SERVINGS_MIN ({low}) cannot exceed SERVINGS_MAX ({high})")

    return low, high


def get_log_level() -> str:
    """Get LOG_LEVEL env var, upper-cased, defaults to INFO."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_app_version() -> str:
    """Get APP_VERSION env var (Docker build ARG), defaults to 0.0.0-dev."""
    return os.getenv("APP_VERSION", "0.0.0-dev")
