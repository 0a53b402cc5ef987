"""
Configuration management module for trajan.

Settings come from built-in defaults, optionally overridden by a YAML file:

    reader:
      kind: velocity
      dtype: float32
      strict: true
    writer:
      name_width: 8
      precision: 12
    logging:
      level: DEBUG
"""
import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..core.coordinate import CoordKind, scalar_type
from ..io.writer import DEFAULT_NAME_WIDTH, DEFAULT_PRECISION
from .helpers import update_dict_recursively

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    'reader': {'kind': CoordKind.POSITION.value, 'dtype': 'float64', 'strict': False},
    'writer': {'name_width': DEFAULT_NAME_WIDTH, 'precision': DEFAULT_PRECISION},
    'logging': {'level': 'INFO'},
}

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigManager:
    """Class for managing trajan configuration settings."""

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        """
        Initialize the configuration manager with defaults.

        Args:
            config_file: Path to a YAML file overriding the defaults (optional)
        """
        self.config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)
        if config_file is not None:
            self.load_config(config_file)

    def load_config(self, config_file: Union[str, Path]) -> None:
        """
        Load configuration from a YAML file and merge it onto the current settings.

        Args:
            config_file: Path to the configuration file
        """
        config_path = Path(config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_file}")

        logger.info(f"Loading configuration from {config_path}")
        with open(config_path, 'r') as f:
            try:
                user_cfg = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in configuration file {config_path}: {e}") from e

        if user_cfg is None:
            user_cfg = {}
        if not isinstance(user_cfg, dict):
            raise ValueError(f"Configuration file must contain a mapping, got {type(user_cfg).__name__}")
        self._merge(user_cfg)

    def _merge(self, updates: Dict[str, Any]) -> None:
        """Merge updates into a copy of the settings and keep it only if it validates."""
        candidate = copy.deepcopy(self.config)
        update_dict_recursively(candidate, copy.deepcopy(updates))
        self._validate_config(candidate)
        self.config = candidate

    def _validate_config(self, config: Optional[Dict[str, Any]] = None) -> None:
        """Validate a configuration dictionary (the current one by default)."""
        if config is None:
            config = self.config
        for key in DEFAULT_CONFIG:
            if not isinstance(config.get(key), dict):
                raise ValueError(f"Missing required configuration section: {key}")

        reader_cfg = config['reader']
        CoordKind.from_value(reader_cfg.get('kind'))
        if not isinstance(reader_cfg.get('dtype'), str):
            raise ValueError(f"reader.dtype must be a type name, got {reader_cfg.get('dtype')!r}")
        scalar_type(reader_cfg['dtype'])
        if not isinstance(reader_cfg.get('strict'), bool):
            raise ValueError("reader.strict must be true or false")

        writer_cfg = config['writer']
        for key in ('name_width', 'precision'):
            value = writer_cfg.get(key)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"writer.{key} must be an integer, got {value!r}")
        if writer_cfg['name_width'] < 1:
            raise ValueError("writer.name_width must be positive")
        if writer_cfg['precision'] < 0:
            raise ValueError("writer.precision must be non-negative")

        level = config['logging'].get('level')
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            raise ValueError(f"logging.level must be one of {LOG_LEVELS}, got {level!r}")

    def get_reader_config(self) -> Dict[str, Any]:
        """
        Get reader settings with kind and dtype resolved.

        Returns:
            Dictionary with 'kind' (CoordKind), 'dtype' (numpy type) and 'strict'
        """
        reader_cfg = self.config['reader']
        return {
            'kind': CoordKind.from_value(reader_cfg['kind']),
            'dtype': scalar_type(reader_cfg['dtype']),
            'strict': reader_cfg['strict'],
        }

    def get_writer_config(self) -> Dict[str, Any]:
        return dict(self.config['writer'])

    def get_logging_config(self) -> Dict[str, Any]:
        return dict(self.config['logging'])

    def update_config(self, updates: Dict[str, Any]) -> None:
        """
        Update configuration settings.

        Args:
            updates: Dictionary of configuration updates

        Raises:
            ValueError: If the merged settings are invalid; the current settings are left unchanged
        """
        self._merge(updates)

    def save_config(self, output_file: Union[str, Path]) -> None:
        """
        Save current configuration to a YAML file.

        Args:
            output_file: Path to save the configuration to
        """
        output_path = Path(output_file)
        logger.info(f"Saving configuration to {output_path}")

        with open(output_path, 'w') as f:
            yaml.dump(self.config, f, default_flow_style=False)

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self.config)

    def to_json(self) -> str:
        return json.dumps(self.config, indent=4)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'ConfigManager':
        """
        Create a ConfigManager from a (possibly partial) dictionary of settings.

        Args:
            config_dict: Dictionary of configuration settings

        Returns:
            ConfigManager instance
        """
        instance = cls()
        instance.update_config(config_dict)
        return instance
