"""Loading and saving :class:`~hexkernel.config.KernelConfig` as JSON.

The file lives in the per-user configuration directory reported by
``platformdirs.user_config_dir`` unless the caller passes an explicit path.
Writes go to a temporary sibling first and are then renamed over the
target, so a crash mid-write never leaves a truncated file behind.
"""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_config_dir

from .config import KernelConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "hexkernel.json"


def default_config_path() -> Path:
    """Return the per-user config file location (not created)."""

    return Path(user_config_dir("hexkernel")) / CONFIG_FILENAME


def load_config(path: Path | None = None) -> KernelConfig:
    """Read the configuration, returning defaults when no file exists.

    Malformed content raises :class:`pydantic.ValidationError`.
    """

    target = path or default_config_path()
    if not target.exists():
        logger.debug("No config at %s; using defaults", target)
        return KernelConfig()
    config = KernelConfig.model_validate_json(target.read_text(encoding="utf-8"))
    logger.debug("Loaded config from %s", target)
    return config


def save_config(config: KernelConfig, path: Path | None = None) -> Path:
    """Persist ``config`` atomically and return the written path."""

    target = path or default_config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    temp_path = target.with_suffix(target.suffix + ".tmp")
    try:
        temp_path.write_text(config.model_dump_json(indent=2), encoding="utf-8")
        temp_path.replace(target)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise
    logger.info("Saved config to %s", target)
    return target


__all__ = ["CONFIG_FILENAME", "default_config_path", "load_config", "save_config"]
