"""Config file support for getnews.

Loads defaults from:
  1. ~/.getnews.yaml  (user-level)
  2. ./getnews.yaml   (project-level, overrides user-level)
  3. GETNEWS_* environment variables (override files)
  4. BASE_URL environment variable (the service URL shown in help text)

Example config file:

    # ~/.getnews.yaml
    timezone: America/New_York
    no-color: false
    reverse: true
    base_url: getnews.tech
"""
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping

import yaml

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "getnews.tech"

_BOOL_FIELDS = {"no_color", "reverse", "verbose"}
_INT_FIELDS = {"width"}
_STR_FIELDS = {"timezone", "base_url"}
_FIELDS = _BOOL_FIELDS | _INT_FIELDS | _STR_FIELDS


def _coerce(field: str, value: Any) -> Any:
    """Coerce a raw config value to its field type. Raises ValueError."""
    if field in _BOOL_FIELDS:
        if isinstance(value, str):
            return value.strip().lower() in ("1", "true", "yes", "on")
        return bool(value)
    if field in _INT_FIELDS:
        return int(value)
    return str(value)


def _known_fields(raw: Mapping[Any, Any], origin: str) -> Dict[str, Any]:
    """Keep recognised keys (dashes → underscores), coerced to their types."""
    settings: Dict[str, Any] = {}
    for key, value in raw.items():
        field = str(key).replace("-", "_").lower()
        if field not in _FIELDS or value is None:
            continue
        try:
            settings[field] = _coerce(field, value)
        except (TypeError, ValueError):
            logger.warning(f"[Config] Ignoring invalid {field}={value!r} from {origin}")
    return settings


def config_paths() -> List[Path]:
    """Config files in load order; later files override earlier ones."""
    home = Path.home()
    return [home / ".getnews.yaml", home / ".getnews.yml", Path("getnews.yaml"), Path("getnews.yml")]


def load_config() -> Dict[str, Any]:
    """Load config from YAML files, merging user + project level."""
    config: Dict[str, Any] = {}
    for path in filter(Path.is_file, config_paths()):
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"[Config] Failed to load {path}: {e}")
            continue
        if data is None:
            continue
        if not isinstance(data, dict):
            logger.warning(f"[Config] Expected a mapping in {path}, got {type(data).__name__}")
            continue
        config.update(_known_fields(data, str(path)))
        logger.debug(f"[Config] Loaded {path}")
    return config


def load_env_config() -> Dict[str, Any]:
    """Load config from GETNEWS_* environment variables.

    Maps GETNEWS_TIMEZONE=Europe/Paris → timezone=Europe/Paris,
    GETNEWS_WIDTH=100 → width=100, GETNEWS_NO_COLOR=1 → no_color=True.
    The bare BASE_URL variable sets base_url unless GETNEWS_BASE_URL does.
    """
    prefix = "GETNEWS_"
    raw: Dict[str, Any] = {}
    if os.environ.get("BASE_URL"):
        raw["base_url"] = os.environ["BASE_URL"]
    raw.update({key[len(prefix):]: value for key, value in os.environ.items()
                if key.startswith(prefix)})
    return _known_fields(raw, "environment")


def get_settings(use_files: bool = True) -> Dict[str, Any]:
    """Return merged, type-coerced settings (env vars win over files)."""
    settings = load_config() if use_files else {}
    settings.update(load_env_config())
    return settings


def get_base_url(use_files: bool = True) -> str:
    """The service URL shown in usage examples."""
    return get_settings(use_files=use_files).get("base_url") or DEFAULT_BASE_URL


def apply_config_defaults(parser, args):
    """Apply config defaults to unset CLI args (CLI always wins).

    Priority: CLI flags > env vars (GETNEWS_*) > config files > parser defaults.
    """
    config = get_settings(use_files=not getattr(args, "no_config", False))
    for key, value in config.items():
        if not hasattr(args, key):
            continue
        if getattr(args, key) != parser.get_default(key):
            continue  # User explicitly set it, don't override
        setattr(args, key, value)
    return args
