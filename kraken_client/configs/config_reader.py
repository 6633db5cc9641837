#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Config file reader
Reads kraken.yaml and layers environment variables on top, producing the
RequestConfig every call starts from.

Precedence (later wins): built-in defaults < kraken.yaml < environment.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from kraken_client.drivers.kraken.agent import RequestConfig
from kraken_client.drivers.kraken.Config import (
    ENV_API_VERSION,
    ENV_CONFIG_DIR,
    ENV_ROOT_URL,
    ENV_TIMEOUT_MS,
)


def resolve_config_dir(config_dir: Optional[str] = None) -> Path:
    """config_dir argument, else $KRAKEN_CONFIG_DIR, else this package directory."""
    if config_dir is None:
        config_dir = os.getenv(ENV_CONFIG_DIR) or os.path.dirname(os.path.abspath(__file__))
    return Path(config_dir)


class ConfigReader:
    """Config file reader"""

    def __init__(self, config_dir: str = None):
        """
        Args:
            config_dir: directory holding kraken.yaml, see resolve_config_dir()
        """
        self.config_dir = resolve_config_dir(config_dir)
        self._configs = {}
        self._logger = logging.getLogger(__name__)

    def load_yaml(self, filename: str) -> Dict[str, Any]:
        """
        Load and cache a YAML file from the config directory.

        Args:
            filename: file name, no path

        Returns:
            dict: parsed document ({} for an empty file)

        Raises:
            FileNotFoundError: file does not exist
            yaml.YAMLError: file is not valid YAML
        """
        file_path = self.config_dir / filename

        if not file_path.exists():
            raise FileNotFoundError(f"config file not found: {file_path}")

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            self._logger.error(f"YAML parse error in {filename}: {e}")
            raise

        self._configs[filename] = config
        self._logger.info(f"loaded config file: {filename}")
        return config

    def get_config(self, filename: str, key_path: str = None) -> Any:
        """
        Read a value by dotted path, e.g. get_config('kraken.yaml', 'request.timeout').
        Returns None when the key does not exist.
        """
        if filename not in self._configs:
            self.load_yaml(filename)

        value = self._configs[filename]
        if key_path is None:
            return value

        try:
            for key in key_path.split('.'):
                value = value[key]
            return value
        except (KeyError, TypeError):
            self._logger.warning(f"config key not found: {key_path}")
            return None

    def get_request_settings(self) -> Dict[str, Any]:
        """The 'request' section of kraken.yaml, {} when the file is absent."""
        try:
            section = self.get_config('kraken.yaml', 'request')
        except FileNotFoundError:
            return {}
        return dict(section or {})

    def get_env_overrides(self) -> Dict[str, Any]:
        overrides = {}
        if os.getenv(ENV_ROOT_URL):
            overrides['root_url'] = os.getenv(ENV_ROOT_URL)
        if os.getenv(ENV_TIMEOUT_MS):
            overrides['timeout'] = int(os.getenv(ENV_TIMEOUT_MS))
        if os.getenv(ENV_API_VERSION):
            overrides['version'] = int(os.getenv(ENV_API_VERSION))
        return overrides

    def get_request_config(self) -> RequestConfig:
        """Defaults, then kraken.yaml, then environment."""
        return RequestConfig.default().merge(self.get_request_settings()).merge(self.get_env_overrides())

    def reload_config(self, filename: str = None):
        """Drop cached files (all of them when filename is None)."""
        if filename:
            self._configs.pop(filename, None)
        else:
            self._configs.clear()


def get_request_config(config_dir: str = None) -> RequestConfig:
    """Convenience wrapper around ConfigReader.get_request_config()"""
    return ConfigReader(config_dir).get_request_config()
