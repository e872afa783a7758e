"""Configuration loading and management for buoy-drift.

Configuration sources are merged in priority order:
    1. Defaults (defined in DriftConfig)
    2. Global config (~/.buoy-drift.toml)
    3. Project config (./buoy-drift.toml)
    4. Explicit config file
    5. Environment variables (BUOY_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(fail_on="critical")
    >>> config.fail_on
    'critical'
    >>> config.fix.min_confidence
    'low'
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError
from .models.drift import SEVERITIES
from .models.fix import CONFIDENCE_LEVELS, SUPPORTED_FIX_TYPES

Verbosity = Literal["quiet", "normal", "verbose"]
OutputFormat = Literal["rich", "json", "github"]
FailOn = Literal["critical", "warning", "info", "none"]

OUTPUT_FORMATS = ("rich", "json", "github")
FAIL_ON_LEVELS = SEVERITIES + ("none",)

GLOBAL_CONFIG_NAME = ".buoy-drift.toml"
PROJECT_CONFIG_NAME = "buoy-drift.toml"


@dataclass(frozen=True)
class FixConfig:
    """Settings for fix generation and application.

    Attributes:
        min_confidence: Lowest confidence tier to generate fixes for
        apply_min_confidence: Lowest tier ``buoy fix --apply`` writes to disk
        types: Fix types to generate (empty = all supported)
        include_files: Only fix files matching one of these globs
        exclude_files: Never fix files matching one of these globs
        backup: Write ``<file>.bak`` before modifying a file
    """

    min_confidence: str = "low"
    apply_min_confidence: str = "high"
    types: list[str] = field(default_factory=list)
    include_files: list[str] = field(default_factory=list)
    exclude_files: list[str] = field(default_factory=list)
    backup: bool = False

    def __post_init__(self) -> None:
        for name in ("min_confidence", "apply_min_confidence"):
            value = getattr(self, name)
            if value not in CONFIDENCE_LEVELS:
                raise ValueError(f"{name} must be one of {', '.join(CONFIDENCE_LEVELS)}")
        unknown = [t for t in self.types if t not in SUPPORTED_FIX_TYPES]
        if unknown:
            raise ValueError(f"unsupported fix types: {', '.join(unknown)}")


@dataclass(frozen=True)
class DriftConfig:
    """Configuration for a drift scan.

    Attributes:
        File discovery:
            include_patterns: Glob patterns a file must match (empty = any known template)
            exclude_patterns: Glob patterns to skip
            max_file_size_mb: Larger files are skipped
            max_files: Stop discovering after this many files

        Performance:
            workers: Parallel scan workers (None = auto, capped at 8)

        Routing:
            template_overrides: Extension -> template type (e.g. ``".js" = "react"``)

        Tokens and baseline:
            token_files: Design token sources (.json, .css, .scss)
            baseline_file: Where accepted signal signatures are stored

        Output control:
            fail_on: Lowest severity that fails ``buoy check`` ("none" never fails)
            output_format: rich, json or github
            verbosity: Logging verbosity level

        fix: Nested fix generation settings
    """

    include_patterns: list[str] = field(default_factory=list)
    exclude_patterns: list[str] = field(
        default_factory=lambda: [
            "node_modules/*",
            "dist/*",
            "build/*",
            "out/*",
            ".next/*",
            ".nuxt/*",
            ".svelte-kit/*",
            ".git/*",
            "vendor/*",
            "coverage/*",
            "storybook-static/*",
            "*.min.js",
            "*.min.css",
            "*.bundle.js",
            "*.generated.*",
            "*.d.ts",
        ]
    )
    max_file_size_mb: float = 2.0
    max_files: int = 10000

    workers: Optional[int] = None

    template_overrides: dict[str, str] = field(default_factory=dict)

    token_files: list[str] = field(default_factory=list)
    baseline_file: str = ".buoy-baseline.json"

    fail_on: FailOn = "warning"
    output_format: OutputFormat = "rich"
    verbosity: Verbosity = "normal"

    fix: FixConfig = field(default_factory=FixConfig)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.max_file_size_mb <= 0:
            raise ValueError("max_file_size_mb must be positive")
        if self.max_files < 1:
            raise ValueError("max_files must be at least 1")
        if self.workers is not None and self.workers < 1:
            raise ValueError("workers must be at least 1")
        if self.fail_on not in FAIL_ON_LEVELS:
            raise ValueError(f"fail_on must be one of {', '.join(FAIL_ON_LEVELS)}")
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(f"output_format must be one of {', '.join(OUTPUT_FORMATS)}")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise ValueError("verbosity must be quiet, normal or verbose")
        for ext in self.template_overrides:
            if not ext.startswith("."):
                raise ValueError(f"template_overrides keys must be extensions, got {ext!r}")

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)


def load_config(config_file: Optional[Path] = None, **overrides) -> DriftConfig:
    """Load configuration with auto-discovery and merging.

    Configuration sources are merged in priority order (lowest to highest):
        1. Defaults (DriftConfig field defaults)
        2. Global config (~/.buoy-drift.toml)
        3. Project config (./buoy-drift.toml)
        4. Explicit config file (if config_file provided)
        5. Environment variables (BUOY_* prefix)
        6. CLI overrides (kwargs)

    A ``[fix]`` table configures FixConfig; a ``[templates]`` table is read as
    ``template_overrides``. Overrides whose value is None are ignored, so CLI
    options left unset fall through to the files.

    Raises:
        ConfigurationError: If a config file is missing or invalid
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / GLOBAL_CONFIG_NAME
    if global_config.exists():
        _merge(merged, _load_toml_file(global_config), f"global config '{global_config}'")

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        _merge(merged, _load_toml_file(project_config), f"project config '{project_config}'")

    if config_file is not None:
        config_file = Path(config_file)
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        _merge(merged, _load_toml_file(config_file), f"config file '{config_file}'")

    merged.update(_load_env_vars())

    # Convert verbosity boolean flags to string
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    fix_overrides = overrides.pop("fix", None) or {}
    for key, value in overrides.items():
        if value is not None:
            merged[key] = value

    fix_dict = dict(merged.pop("fix", {}) or {})
    fix_dict.update({k: v for k, v in fix_overrides.items() if v is not None})

    try:
        fix = FixConfig(**fix_dict)
    except TypeError as e:
        raise ConfigurationError(f"Invalid [fix] config: {e}")
    except ValueError as e:
        raise InvalidConfigError("fix", fix_dict, str(e))

    try:
        return DriftConfig(fix=fix, **merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")
    except ValueError as e:
        raise InvalidConfigError("config", merged, str(e))


def _merge(merged: dict, loaded: dict, source: str) -> None:
    """Fold one TOML document into ``merged``; nested tables merge key by key."""
    loaded = dict(loaded)
    templates = loaded.pop("templates", None)
    if templates is not None:
        if not isinstance(templates, dict):
            raise ConfigurationError(f"Invalid {source}: [templates] must be a table")
        overrides = dict(merged.get("template_overrides", {}))
        overrides.update(templates)
        merged["template_overrides"] = overrides

    fix = loaded.pop("fix", None)
    if fix is not None:
        if not isinstance(fix, dict):
            raise ConfigurationError(f"Invalid {source}: [fix] must be a table")
        merged_fix = dict(merged.get("fix", {}))
        merged_fix.update(fix)
        merged["fix"] = merged_fix

    merged.update(loaded)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from BUOY_* environment variables.

    Supported environment variables:
        BUOY_MAX_FILE_SIZE_MB: float
        BUOY_MAX_FILES: int
        BUOY_WORKERS: int
        BUOY_BASELINE_FILE: str
        BUOY_FAIL_ON: critical/warning/info/none
        BUOY_OUTPUT_FORMAT: rich/json/github
        BUOY_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any BUOY_* vars found.
    """
    type_hints = get_type_hints(DriftConfig)

    result: dict[str, Any] = {}

    for field_name in DriftConfig.__dataclass_fields__:
        env_key = f"BUOY_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint, field_name)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))

    return result


def _parse_env_value(value: str, type_hint: Any, field_name: str) -> Any:
    """Parse environment variable string to the correct type.

    Returns None for types that cannot come from a single string (lists,
    dicts, nested configs).

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if origin in (list, dict) or type_hint in (list, dict):
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    # String (including Literal types like FailOn)
    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If tomllib/tomli is unavailable or parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config '{path}': {e}")
