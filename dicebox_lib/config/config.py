"""Application configuration stored as YAML.

The file holds the log level, the dice sets a room starts with and the
local player identity. Any key missing from the file falls back to
`DEFAULT_APP_CONFIG`; a missing file yields the defaults unchanged.
"""
from __future__ import annotations
import copy
import logging
import uuid
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path('data/config/dicebox_config.yml')

DEFAULT_APP_CONFIG: Dict[str, Any] = {
    'schema_version': 1,
    'log_level': 'INFO',
    'dice': {
        'dice_sets': [
            {'id': 'set-1', 'count': 2, 'color': '#ffffff'},
        ],
    },
    'local_player': {
        'id': None,
        'username': 'Player',
    },
}


def load_app_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load the YAML config at `path`, merged over the defaults."""
    cfg = copy.deepcopy(DEFAULT_APP_CONFIG)
    cfg_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not cfg_path.exists():
        logger.info("No config at %s; using defaults", cfg_path)
    else:
        with cfg_path.open('r', encoding='utf-8') as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file {cfg_path} must contain a mapping")
        for key, value in loaded.items():
            if isinstance(value, dict) and isinstance(cfg.get(key), dict):
                cfg[key] = {**cfg[key], **value}
            else:
                cfg[key] = value
        for key in ('dice', 'local_player'):
            if not isinstance(cfg[key], dict):
                raise ValueError(f"Config key '{key}' in {cfg_path} must be a mapping")
        logger.debug("Loaded config from %s", cfg_path)

    if not cfg['local_player'].get('id'):
        cfg['local_player']['id'] = uuid.uuid4().hex[:8]
    return cfg


def save_app_config(cfg: Dict[str, Any], path: Optional[Path] = None) -> Path:
    cfg_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    with cfg_path.open('w', encoding='utf-8') as f:
        yaml.safe_dump(cfg, f, sort_keys=False)
    return cfg_path
