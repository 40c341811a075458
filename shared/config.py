"""
PassForge Configuration Management
===================================

Centralized configuration for the PassForge toolkit using Python
dataclasses and TOML-based persistence.

The analyzers never read configuration themselves; the CLI layer loads a
:class:`ForgeConfig` once and hands the relevant values down as plain
arguments.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]


# ---------------------------------------------------------------------------
# Default configuration file path relative to the PassForge root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"

# TOML value types accepted for each annotated dataclass field type
_FIELD_TYPES: dict[str, type] = {"int": int, "str": str, "bool": bool}

# Fields that must hold a value greater than zero
_POSITIVE_FIELDS = frozenset(
    {"guesses_per_second", "default_length", "min_length", "max_length", "banner_width"}
)


class ConfigError(ValueError):
    """Raised when a configuration file cannot be parsed or holds bad values."""


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class PassForgeConfig:
    """Configuration for the password tool itself.

    Controls the brute-force guess rate assumed by the crack-time
    estimator, the generator's length policy, and banner rendering.
    """

    # Crack-time estimation
    guesses_per_second: int = 100_000_000_000

    # Generator length policy
    default_length: int = 16
    min_length: int = 8
    max_length: int = 1024

    # Banner rendering
    banner_font: str = "standard"
    banner_width: int = 80
    title: str = "PassForge"
    default_banner_text: str = "PassForge"


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity and destinations."""

    log_level: str = "WARNING"
    log_file: str = ""
    log_json: bool = False
    debug: bool = False


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class ForgeConfig:
    """Master configuration aggregating tool and global settings.

    Usage:
        >>> config = ForgeConfig.load()                  # from default path
        >>> config = ForgeConfig.load("custom.toml")     # from custom path
        >>> config.passforge.guesses_per_second
        100000000000
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    passforge: PassForgeConfig = field(default_factory=PassForgeConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> ForgeConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`ForgeConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
            ConfigError: If the file is not valid TOML or a value has the
                wrong type.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            try:
                raw: dict[str, Any] = tomllib.load(fh)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(f"{config_path}: {exc}") from exc

        return cls(
            global_settings=cls._build_section(
                GlobalConfig, "global", raw.get("global", {})
            ),
            passforge=cls._build_section(
                PassForgeConfig, "passforge", raw.get("passforge", {})
            ),
        )

    # ------------------------------------------------------------------ #
    #  Serialisation helpers
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_section(cls: type, section: str, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are ignored. Known keys must carry
        the field's type (``bool`` is not accepted for ``int`` fields).
        """
        fields = cls.__dataclass_fields__  # type: ignore[attr-defined]
        filtered: dict[str, Any] = {}
        for key, value in data.items():
            if key not in fields:
                continue
            expected = _FIELD_TYPES[str(fields[key].type)]
            if not isinstance(value, expected) or (
                expected is int and isinstance(value, bool)
            ):
                raise ConfigError(
                    f"[{section}] {key} must be of type {expected.__name__}, "
                    f"got {value!r}"
                )
            if key in _POSITIVE_FIELDS and value <= 0:
                raise ConfigError(f"[{section}] {key} must be positive, got {value}")
            filtered[key] = value
        return cls(**filtered)
