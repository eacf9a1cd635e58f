"""
CLI Configuration utilities

Loads CLI configuration from .tmplrc.yaml
"""

import copy
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from tmpl_core.config import StoreConfig
from tmpl_core.store import TemplateStore

CONFIG_FILENAME = ".tmplrc.yaml"


class CLIConfig:
    """
    Manages CLI configuration from .tmplrc.yaml files.

    Configuration is loaded in this order (last wins):
    1. Built-in defaults
    2. User home directory config (~/.tmplrc.yaml)
    3. Current directory config (./.tmplrc.yaml)
    """

    DEFAULT_CONFIG = {
        "store": {
            "root": None  # None means ~/.templates
        },
        "list": {
            "format": "table"
        }
    }

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize CLI config.

        Args:
            config_file: Optional path to config file. If None, searches standard locations.
        """
        self.config: Dict[str, Any] = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_file:
            self.load_from_file(config_file)
        else:
            self.load_standard_configs()

    def load_standard_configs(self):
        """Load config from standard locations in order."""
        home_config = Path.home() / CONFIG_FILENAME
        if home_config.is_file():
            self.load_from_file(str(home_config))

        local_config = Path.cwd() / CONFIG_FILENAME
        if local_config.is_file() and local_config != home_config:
            self.load_from_file(str(local_config))

    def load_from_file(self, config_file: str):
        """
        Load configuration from a YAML file.

        Missing or malformed files are ignored; config is optional.

        Args:
            config_file: Path to config file
        """
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                loaded_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError):
            return

        if isinstance(loaded_config, dict):
            self._merge_config(loaded_config)

    def _merge_config(self, new_config: Dict[str, Any]):
        """Recursively merge new config into existing config."""
        for key, value in new_config.items():
            if key in self.config and isinstance(self.config[key], dict) and isinstance(value, dict):
                self.config[key].update(value)
            else:
                self.config[key] = value

    def get(self, section: str, option: str, default: Any = None) -> Any:
        """
        Get a config value.

        Args:
            section: Section name (e.g., 'store', 'list')
            option: Option name (e.g., 'root', 'format')
            default: Default value if not found

        Returns:
            Configuration value or default
        """
        values = self.config.get(section)
        if isinstance(values, dict):
            value = values.get(option)
            return default if value is None else value
        return default

    def to_dict(self) -> Dict[str, Any]:
        """Return configuration as dictionary."""
        return copy.deepcopy(self.config)


def load_cli_config(config_file: Optional[str] = None) -> CLIConfig:
    """
    Load CLI configuration.

    Args:
        config_file: Optional path to config file

    Returns:
        CLIConfig instance
    """
    return CLIConfig(config_file)


def store_from_context(ctx) -> TemplateStore:
    """
    Get the TemplateStore prepared by the top-level command.

    Falls back to the configured/default store root when a command is
    invoked on its own (e.g. directly from a test runner).
    """
    obj = ctx.find_object(dict) if ctx is not None else None
    if obj and obj.get("store") is not None:
        return obj["store"]

    config = load_cli_config()
    return TemplateStore(StoreConfig.resolve(config.get("store", "root")).root)
