"""
Configuration settings for mathcustom.

**Conceptual**: This module provides strongly-typed configuration objects that
load from environment variables (via .env files). Settings are validated when
they are built, so a bad value fails fast with a clear message instead of
surfacing later as a confusing numpy error.

The library itself is pure math, so there is very little to configure:
  - The seed for the default random generator (reproducible procedural runs).
  - The log level applied by `configure_logging`.

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from project root (dev/local environments); a missing file is fine
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


@dataclass(frozen=True)
class RandomSettings:
    """
    Configuration for the default random generator.

    **Conceptual**: Procedural generation is much easier to debug when a run
    can be replayed. Setting a seed makes the module-level generator used by
    `random_sign` / `random_range` deterministic. Leaving it unset draws
    fresh entropy from the OS on every process start.

    Attributes:
        seed: Non-negative integer seed, or None for OS entropy.
    """
    seed: Optional[int] = None

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.seed is not None and self.seed < 0:
            raise ValueError(f"MATHCUSTOM_SEED must be non-negative, got: {self.seed}")

    @classmethod
    def from_env(cls) -> "RandomSettings":
        """
        Load random settings from environment variables.

        **Environment variables**:
          - MATHCUSTOM_SEED (optional): Integer seed. Empty or unset means no seed.

        Returns:
            RandomSettings object with values loaded from environment.

        Raises:
            ValueError: If MATHCUSTOM_SEED is not a non-negative integer.
        """
        seed_str = os.getenv("MATHCUSTOM_SEED", "").strip()
        if not seed_str:
            return cls(seed=None)

        try:
            seed = int(seed_str)
        except ValueError:
            raise ValueError(f"MATHCUSTOM_SEED must be an integer, got: {seed_str}")

        return cls(seed=seed)


@dataclass(frozen=True)
class LoggingSettings:
    """
    Configuration for library logging.

    Attributes:
        level: Standard logging level name (default WARNING, so the library
               stays quiet unless asked).
    """
    level: str = "WARNING"

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"MATHCUSTOM_LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, "
                f"got: {self.level}"
            )

    @property
    def level_number(self) -> int:
        """Numeric logging level for `logging.Logger.setLevel`."""
        return logging.getLevelName(self.level)

    @classmethod
    def from_env(cls) -> "LoggingSettings":
        """
        Load logging settings from environment variables.

        **Environment variables**:
          - MATHCUSTOM_LOG_LEVEL (optional): Level name, case-insensitive.
            Defaults to WARNING if not set.

        Returns:
            LoggingSettings object with values loaded from environment.

        Raises:
            ValueError: If the level name is not a standard logging level.
        """
        level = os.getenv("MATHCUSTOM_LOG_LEVEL", "WARNING").strip().upper()
        return cls(level=level or "WARNING")


@dataclass(frozen=True)
class Settings:
    """
    Global settings for mathcustom.

    **Usage pattern**:
      ```python
      from mathcustom.config.settings import Settings

      settings = Settings.from_env()
      seed = settings.random.seed
      ```

    Attributes:
        random: Default random generator settings.
        log: Logging settings.
    """
    random: RandomSettings = field(default_factory=RandomSettings)
    log: LoggingSettings = field(default_factory=LoggingSettings)

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load global settings from environment variables.

        Returns:
            Settings object with all subsystem settings loaded from environment.

        Raises:
            ValueError: If any environment variable holds an invalid value.
        """
        return cls(
            random=RandomSettings.from_env(),
            log=LoggingSettings.from_env(),
        )


# Lazily-loaded singleton; tests can inject their own Settings or call reset_settings()
_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings singleton.

    Settings are loaded from the environment on first call, then cached.

    Returns:
        Global Settings singleton.

    Raises:
        ValueError: If the environment holds invalid values.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = Settings.from_env()

    return _default_settings


def reset_settings():
    """
    Reset the global settings singleton (for testing).

    **Testing pattern**:
      ```python
      def test_something(monkeypatch):
          monkeypatch.setenv("MATHCUSTOM_SEED", "7")
          reset_settings()
          assert get_settings().random.seed == 7
      ```
    """
    global _default_settings
    _default_settings = None
