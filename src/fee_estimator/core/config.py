"""YAML configuration loading, dotted-key lookup and config file discovery."""

from pathlib import Path
from typing import Any, Optional

import yaml

_SENTINEL = object()

PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"
FEE_SCHEDULE_FILE = "fee_schedule.yaml"


def load_config(path: str) -> dict:
    """Read a YAML file into a dict. Missing files raise FileNotFoundError."""
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(file_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_setting(config: dict, key: str, default: Any = _SENTINEL) -> Any:
    """Look up a nested value by dotted path, e.g. ``fee_schedule.bands``.

    Args:
        config: Parsed config dict.
        key: Dot-separated path.
        default: Returned when the path is missing. Without it a KeyError
            is raised.
    """
    current: Any = config
    for part in key.split("."):
        if isinstance(current, dict) and part in current:
            current = current[part]
        elif default is not _SENTINEL:
            return default
        else:
            raise KeyError(f"Config key not found: {key}")
    return current


def find_schedule_path(
    explicit: Optional[str] = None, config_dir: Path = CONFIG_DIR
) -> Optional[Path]:
    """Locate the fee schedule YAML.

    An explicit path wins and must exist. Otherwise ``fee_schedule.yaml`` in
    ``config_dir`` is used when present; None means no file, so callers fall
    back to the built-in schedule.
    """
    if explicit:
        path = Path(explicit)
        if not path.exists():
            raise FileNotFoundError(f"Fee schedule not found: {explicit}")
        return path
    candidate = Path(config_dir) / FEE_SCHEDULE_FILE
    return candidate if candidate.exists() else None
