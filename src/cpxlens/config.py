"""Configuration loading and management for cpxlens.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.cpxlens.toml)
    3. Project config (./cpxlens.toml)
    4. Explicit config file
    5. Environment variables (CPXLENS_* prefix)
    6. CLI overrides (passed as kwargs)

Example TOML:

    exclude_patterns = ["node_modules/*", "*.spec.ts"]

    [thresholds.cognitive]
    warning_threshold = 10
    error_threshold = 20

    [weights]
    depth = 0.5
"""

from __future__ import annotations

import fnmatch
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]


@dataclass(frozen=True)
class ComplexityThresholds:
    """Warning and error thresholds for one complexity type.

    A method is CORRECT up to ``warning_threshold`` included, ERROR strictly
    above ``error_threshold`` and WARNING in between.
    """

    warning_threshold: float
    error_threshold: float

    def __post_init__(self) -> None:
        if self.warning_threshold < 0:
            raise InvalidConfigError(
                "warning_threshold", self.warning_threshold, "must be non-negative"
            )
        if self.error_threshold < self.warning_threshold:
            raise InvalidConfigError(
                "error_threshold",
                self.error_threshold,
                f"must be >= warning_threshold ({self.warning_threshold})",
            )


@dataclass(frozen=True)
class Thresholds:
    """Thresholds for both complexity types."""

    cognitive: ComplexityThresholds = field(
        default_factory=lambda: ComplexityThresholds(warning_threshold=10, error_threshold=20)
    )
    cyclomatic: ComplexityThresholds = field(
        default_factory=lambda: ComplexityThresholds(warning_threshold=5, error_threshold=10)
    )

    def for_type(self, cpx_type: Any) -> ComplexityThresholds:
        """Thresholds of a ComplexityType (or of its string value)."""
        key = getattr(cpx_type, "value", cpx_type)
        return getattr(self, key)


@dataclass(frozen=True)
class FactorWeights:
    """Weight of each construct in the cognitive complexity index.

    Attributes:
        Basic:
            conditional: if / else-if / switch / ternary
            loop: for, while, do
            catch: catch / except clauses
            else_block: the else branch of an if
            logic_door: each logical AND/OR expression
            jump: jump to a label (break label, continue label)
            recursion: call of the enclosing method by its own name

        Scaled by the running nesting depth:
            nesting: weight per enclosing nesting-sensitive construct
            depth: weight of a nested data access (a[i][j], a[b[i]])

        Other:
            structural: logic door mixing operators without parentheses
            aggregation: function or closure declared inside a method
    """

    conditional: float = 1.0
    loop: float = 1.0
    catch: float = 1.0
    else_block: float = 1.0
    logic_door: float = 1.0
    jump: float = 1.0
    recursion: float = 1.0
    nesting: float = 1.0
    depth: float = 0.5
    structural: float = 1.0
    aggregation: float = 1.0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value < 0:
                raise InvalidConfigError(f"weights.{f.name}", value, "must be non-negative")


@dataclass(frozen=True)
class IgnoreRules:
    """Ignore-path predicate built from glob patterns."""

    patterns: tuple[str, ...] = ()
    allow_hidden_files: bool = False

    def is_ignored(self, path: Path, root: Optional[Path] = None) -> bool:
        """True if ``path`` must be skipped by the folder walk.

        Patterns are matched against the path relative to ``root`` (posix
        separators) and against the bare file name.
        """
        path = Path(path)
        if not self.allow_hidden_files and path.name.startswith("."):
            return True
        relative = path
        if root is not None:
            try:
                relative = path.resolve().relative_to(Path(root).resolve())
            except ValueError:
                relative = path
        rel_posix = relative.as_posix()
        for pattern in self.patterns:
            if fnmatch.fnmatch(rel_posix, pattern) or fnmatch.fnmatch(path.name, pattern):
                return True
            # "dir/*" also ignores the directory itself
            if pattern.endswith("/*") and (
                rel_posix == pattern[:-2] or path.name == pattern[:-2]
            ):
                return True
        return False


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for analysis execution.

    Attributes:
        thresholds: Warning/error thresholds per complexity type
        weights: Weights of the cognitive complexity factors
        exclude_patterns: Glob patterns to exclude from analysis
        languages: Languages to analyze
        max_file_size_mb: Files bigger than this are skipped
        allow_hidden_files: Include hidden files (starting with .)
        verbosity: Logging verbosity level
        log_file: Optional file receiving a copy of the log records
    """

    thresholds: Thresholds = field(default_factory=Thresholds)
    weights: FactorWeights = field(default_factory=FactorWeights)

    exclude_patterns: list[str] = field(
        default_factory=lambda: [
            "node_modules/*",
            "dist/*",
            "build/*",
            "venv/*",
            ".venv/*",
            "__pycache__/*",
            ".tox/*",
            ".mypy_cache/*",
            ".pytest_cache/*",
            "*.egg-info/*",
            "*.min.js",
            "*.bundle.js",
            "*.d.ts",
        ]
    )
    languages: list[str] = field(
        default_factory=lambda: ["python", "javascript", "typescript", "tsx"]
    )
    max_file_size_mb: float = 5.0
    allow_hidden_files: bool = False
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        if self.max_file_size_mb <= 0:
            raise InvalidConfigError(
                "max_file_size_mb", self.max_file_size_mb, "must be positive"
            )
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)

    @property
    def ignore_rules(self) -> IgnoreRules:
        return IgnoreRules(
            patterns=tuple(self.exclude_patterns),
            allow_hidden_files=self.allow_hidden_files,
        )


# Threshold environment variables -> (complexity type, field)
_THRESHOLD_ENV_VARS = {
    "CPXLENS_COGNITIVE_WARNING_THRESHOLD": ("cognitive", "warning_threshold"),
    "CPXLENS_COGNITIVE_ERROR_THRESHOLD": ("cognitive", "error_threshold"),
    "CPXLENS_CYCLOMATIC_WARNING_THRESHOLD": ("cyclomatic", "warning_threshold"),
    "CPXLENS_CYCLOMATIC_ERROR_THRESHOLD": ("cyclomatic", "error_threshold"),
}


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags)

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
    """
    merged: dict = {}

    global_config = Path.home() / ".cpxlens.toml"
    if global_config.exists():
        _merge(merged, _load_toml_file(global_config))

    project_config = Path.cwd() / "cpxlens.toml"
    if project_config.exists():
        _merge(merged, _load_toml_file(project_config))

    if config_file is not None:
        if not Path(config_file).exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        _merge(merged, _load_toml_file(Path(config_file)))

    _merge(merged, _load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    _merge(merged, overrides)

    thresholds = merged.pop("thresholds", None)
    if isinstance(thresholds, dict):
        merged["thresholds"] = _build_thresholds(thresholds)
    elif thresholds is not None:
        merged["thresholds"] = thresholds

    weights = merged.pop("weights", None)
    if isinstance(weights, dict):
        try:
            merged["weights"] = FactorWeights(**weights)
        except TypeError as e:
            raise ConfigurationError(f"Invalid [weights] config: {e}")
    elif weights is not None:
        merged["weights"] = weights

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _merge(base: dict, override: dict) -> None:
    """Recursively merge ``override`` into ``base`` in place."""
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value


def _build_thresholds(raw: dict) -> Thresholds:
    defaults = Thresholds()
    kwargs = {}
    for cpx_type in ("cognitive", "cyclomatic"):
        section = raw.get(cpx_type)
        if section is None:
            continue
        if not isinstance(section, dict):
            raise InvalidConfigError(f"thresholds.{cpx_type}", section, "expected a table")
        current = getattr(defaults, cpx_type)
        try:
            kwargs[cpx_type] = ComplexityThresholds(
                warning_threshold=float(section.get("warning_threshold", current.warning_threshold)),
                error_threshold=float(section.get("error_threshold", current.error_threshold)),
            )
        except (TypeError, ValueError) as e:
            raise InvalidConfigError(f"thresholds.{cpx_type}", section, str(e))
    unknown = set(raw) - {"cognitive", "cyclomatic"}
    if unknown:
        raise ConfigurationError(f"Invalid [thresholds] config: unknown keys {sorted(unknown)}")
    return Thresholds(**kwargs)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from CPXLENS_* environment variables.

    Supported environment variables:
        CPXLENS_MAX_FILE_SIZE_MB: float
        CPXLENS_ALLOW_HIDDEN_FILES: bool (true/false/1/0)
        CPXLENS_VERBOSITY: quiet/normal/verbose
        CPXLENS_LOG_FILE: path
        CPXLENS_{COGNITIVE,CYCLOMATIC}_{WARNING,ERROR}_THRESHOLD: float
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"CPXLENS_{field_name.upper()}"
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
            raise ConfigurationError(f"Invalid {env_key}: {e}")

    for env_key, (cpx_type, threshold_field) in _THRESHOLD_ENV_VARS.items():
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue
        try:
            value = float(env_value)
        except ValueError:
            raise ConfigurationError(f"Invalid {env_key}: expected a number, got '{env_value}'")
        result.setdefault("thresholds", {}).setdefault(cpx_type, {})[threshold_field] = value

    return result


def _parse_env_value(value: str, type_hint: Any, field_name: str) -> Any:
    """Parse environment variable string to the correct type.

    Returns None for types that cannot be set from the environment.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]

    # Lists and nested dataclasses come from TOML only
    if origin is list or type_hint is list:
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

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If TOML support is missing or parsing fails
    """
    try:
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
        raise ConfigurationError(f"Invalid config file '{path}': {e}")
