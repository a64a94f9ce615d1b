import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import structlog

logger = structlog.get_logger().bind(module="config")

CONFIG_DIR_ENV = "TIMELINE_CONFIG_DIR"
DEFAULT_CONFIG_FILES = ("timeline.json", "logging.json")


class ConfigNode:
    """A node in the configuration tree that allows both dictionary and attribute access."""

    def __init__(self, data: Dict[str, Any]):
        self._data = {}

        for key, value in data.items():
            if isinstance(value, dict):
                self._data[key] = ConfigNode(value)
            else:
                self._data[key] = value

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        if name in self._data:
            return self._data[name]
        raise AttributeError(f"Config has no attribute '{name}'")

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            super().__setattr__(name, value)
        else:
            self._data[name] = value

    def __setitem__(self, key: str, value: Any) -> None:
        self._data[key] = value

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value using a dot-separated path.

        Intermediate nodes are created as needed.
        """
        path_parts = key.split(".")
        node = self
        for part in path_parts[:-1]:
            if part not in node._data or not isinstance(node._data[part], ConfigNode):
                node._data[part] = ConfigNode({})
            node = node._data[part]

        final_value = ConfigNode(value) if isinstance(value, dict) else value
        node._data[path_parts[-1]] = final_value

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the config node to a plain dictionary.

        Returns:
            Dict[str, Any]: The complete configuration dictionary
        """
        result = {}
        for key, value in self._data.items():
            if isinstance(value, ConfigNode):
                result[key] = value.to_dict()
            else:
                result[key] = value
        return result


class Config(ConfigNode):
    """Configuration class that maintains hierarchical structure from JSON files.

    Source files hold the defaults. A file with the same name in the override
    directory is overlaid on top of its source file.
    """

    def __init__(
        self,
        json_files: List[Union[str, Path]],
        override_dir: Optional[Union[str, Path]] = None,
    ) -> None:
        self._file_mapping = {}  # Maps top-level keys to their source files
        self._json_files = [str(f) for f in json_files]
        self._override_dir = Path(override_dir) if override_dir else None
        self._original_config = {}
        self.reload()

    def _merge_config(self, tree: Dict[str, Any], new_data: Dict[str, Any]) -> None:
        """Merge while maintaining hierarchy."""
        for key, value in new_data.items():
            if isinstance(value, dict):
                if key not in tree or not isinstance(tree[key], dict):
                    tree[key] = {}
                current = tree[key]
                for subkey, subvalue in value.items():
                    logger.debug("Setting config value", key=f"{key}.{subkey}")
                    current[subkey] = subvalue
            else:
                logger.debug("Setting config value", key=key)
                tree[key] = value

    def reload(self, json_files: Optional[List[Union[str, Path]]] = None) -> None:
        """Reload configuration from the source files and any overrides.

        Args:
            json_files: Optional list of JSON files to reload. If None, uses existing file list.

        Raises:
            RuntimeError: If a source file is missing or holds invalid JSON.
        """
        if json_files is not None:
            self._json_files = [str(f) for f in json_files]

        config_tree = {}
        self._file_mapping.clear()

        try:
            for json_file in self._json_files:
                source_path = Path(json_file)
                with open(source_path, "r") as f:
                    source_data = json.load(f)

                for key in source_data:
                    self._file_mapping[key] = str(source_path)
                self._merge_config(config_tree, source_data)

            if self._override_dir is not None:
                for json_file in self._json_files:
                    override_file = self._override_dir / Path(json_file).name
                    if not override_file.exists():
                        continue
                    try:
                        with open(override_file, "r") as f:
                            override_data = json.load(f)
                    except json.JSONDecodeError:
                        logger.warning(
                            "Ignoring invalid override config", file=str(override_file)
                        )
                        continue
                    self._merge_config(config_tree, override_data)
                    logger.info("Applied config overrides", file=str(override_file))

        except FileNotFoundError as e:
            raise RuntimeError(f"Configuration file not found: {e}") from e
        except json.JSONDecodeError as e:
            raise RuntimeError(f"Invalid JSON in configuration file: {e}") from e

        super().__init__(config_tree)
        self._original_config = copy.deepcopy(config_tree)

    def has_changes(self) -> bool:
        """Return True if values were set since the last load."""
        return self.to_dict() != self._original_config

    def source_of(self, key: str) -> Optional[str]:
        """Return the file a top-level key was loaded from."""
        return self._file_mapping.get(key)


def default_override_dir() -> Path:
    """Directory holding user overrides of the packaged configuration."""
    env_dir = os.getenv(CONFIG_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return Path.home() / ".config" / "horizontal_timeline"


def load_default_config(override_dir: Optional[Union[str, Path]] = None) -> Config:
    """Load the packaged configuration files plus any user overrides."""
    source_dir = Path(__file__).parent
    json_files = [source_dir / name for name in DEFAULT_CONFIG_FILES]
    config = Config(json_files, override_dir or default_override_dir())
    logger.info("Configuration loaded", files=[str(f) for f in json_files])
    return config
