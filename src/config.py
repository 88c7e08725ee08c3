#!/usr/bin/env python3
"""
Configuration for the Key Light Air adapter
Reads the add-on manifest and optional user settings using XDG standards
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from core.settings_schema import (
    DEFAULT_ADDON_ID,
    AdvancedSettings,
    LightSettings,
    defaults_dict,
    is_valid_setting,
)

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST_PATH = Path(__file__).resolve().parent.parent / 'manifest.json'


class AddonConfig:
    """Add-on id from the manifest plus settings from the XDG config directory"""

    def __init__(self, manifest_path: Optional[Path] = None,
                 settings_path: Optional[Path] = None):
        self.manifest_path = Path(manifest_path) if manifest_path else DEFAULT_MANIFEST_PATH
        self.settings_path = Path(settings_path) if settings_path else self._get_settings_path()
        self.addon_id = self._load_addon_id()
        self.settings = self._load_settings()

    def _get_settings_path(self) -> Path:
        """Get settings file path following XDG standards"""
        # Use XDG_CONFIG_HOME if set, otherwise default to ~/.config
        config_home = os.environ.get('XDG_CONFIG_HOME')
        if config_home:
            config_dir = Path(config_home) / 'keylight-air-adapter'
        else:
            config_dir = Path.home() / '.config' / 'keylight-air-adapter'
        return config_dir / 'settings.json'

    def _load_addon_id(self) -> str:
        try:
            with open(self.manifest_path, 'r', encoding='utf-8') as f:
                manifest = json.load(f)
        except FileNotFoundError:
            logger.warning("No manifest at %s, using id %s", self.manifest_path, DEFAULT_ADDON_ID)
            return DEFAULT_ADDON_ID
        except (json.JSONDecodeError, IOError) as e:
            logger.warning("Error loading manifest from %s: %s", self.manifest_path, e)
            return DEFAULT_ADDON_ID

        addon_id = manifest.get('id') if isinstance(manifest, dict) else None
        if not isinstance(addon_id, str) or not addon_id:
            logger.warning("Manifest %s has no id, using %s", self.manifest_path, DEFAULT_ADDON_ID)
            return DEFAULT_ADDON_ID
        return addon_id

    def _load_settings(self) -> Dict[str, Any]:
        """Load settings from file, return defaults if file doesn't exist"""
        settings = defaults_dict()
        if not self.settings_path.exists():
            return settings

        try:
            with open(self.settings_path, 'r', encoding='utf-8') as f:
                overrides = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning("Error loading settings from %s: %s", self.settings_path, e)
            return settings

        if not isinstance(overrides, dict):
            logger.warning("Invalid settings structure in %s, using defaults", self.settings_path)
            return settings

        for key, value in overrides.items():
            if key not in settings:
                logger.warning("Ignoring unknown setting %s", key)
                continue
            if not is_valid_setting(key, value):
                logger.warning("Invalid value %r for %s, keeping %r", value, key, settings[key])
                continue
            settings[key] = value
        return settings

    def get(self, key: str, default: Any = None) -> Any:
        return self.settings.get(key, default)

    @property
    def light(self) -> LightSettings:
        return LightSettings(
            host=self.get('light.host'),
            port=self.get('light.port'),
            path=self.get('light.path'),
            http_timeout_s=self.get('light.http_timeout_s'),
        )

    @property
    def advanced(self) -> AdvancedSettings:
        return AdvancedSettings(
            enable_debug_logging=self.get('advanced.enable_debug_logging'),
        )
