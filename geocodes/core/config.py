"""Configuration for the data directory and default country."""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from geocodes.core.constants import (
    BUNDLED_DATA_DIR,
    DEFAULT_COUNTRY,
    MAX_CONFIG_FILE_SIZE,
)
from geocodes.core.exceptions import ConfigError
from geocodes.reference_data.store import ReferenceDataStore


class GeocodesConfig:
    """
    Data directory and default country used by a LookupService.

    The config owns the ReferenceDataStore so that changing ``data_path``
    always invalidates the cached tables. ``default_country`` is only read
    as a default argument and never touches the cache.
    """

    FIELDS = ('data_path', 'default_country')

    def __init__(
        self,
        data_path: Optional[Union[str, Path]] = None,
        default_country: str = DEFAULT_COUNTRY,
        store: Optional[ReferenceDataStore] = None
    ):
        """
        Initialize configuration.

        Args:
            data_path: Data directory (default: data bundled with the package)
            default_country: Country code used when subdivision lookups omit one
            store: Existing store to manage; its base path is replaced by data_path
        """
        path = Path(data_path) if data_path is not None else BUNDLED_DATA_DIR
        if store is None:
            store = ReferenceDataStore(path)
        else:
            store.set_base_path(path)
        self._store = store
        self._default_country = default_country

    @property
    def store(self) -> ReferenceDataStore:
        return self._store

    @property
    def data_path(self) -> Path:
        return self._store.base_path

    @data_path.setter
    def data_path(self, path: Union[str, Path]) -> None:
        self._store.set_base_path(path)

    @property
    def default_country(self) -> str:
        return self._default_country

    @default_country.setter
    def default_country(self, country_code: str) -> None:
        self._default_country = country_code

    @classmethod
    def from_dict(cls, config_dict: Optional[Dict[str, Any]]) -> "GeocodesConfig":
        """
        Build a config from a mapping with optional ``data_path`` and
        ``default_country`` keys.

        Raises:
            ConfigError: If the mapping has unknown keys or is not a mapping
        """
        config_dict = config_dict or {}
        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"Configuration must be a mapping, got {type(config_dict).__name__}"
            )

        for key in config_dict:
            if key not in cls.FIELDS:
                raise ConfigError(
                    f"Unknown configuration field '{key}'. "
                    f"Expected one of: {', '.join(cls.FIELDS)}",
                    field=key
                )

        default_country = config_dict.get('default_country', DEFAULT_COUNTRY)
        if not isinstance(default_country, str) or not default_country:
            raise ConfigError(
                f"default_country must be a non-empty string, got {default_country!r}",
                field='default_country'
            )

        return cls(
            data_path=config_dict.get('data_path'),
            default_country=default_country
        )

    @classmethod
    def from_yaml(cls, config_path: Union[str, Path]) -> "GeocodesConfig":
        """
        Load configuration from a YAML file.

        A relative ``data_path`` is resolved against the config file's directory.

        Raises:
            ConfigError: If the file is missing, too large, or invalid
        """
        config_file = Path(config_path)
        if not config_file.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")

        file_size = os.path.getsize(config_file)
        if file_size > MAX_CONFIG_FILE_SIZE:
            raise ConfigError(
                f"Configuration file too large: {file_size:,} bytes. "
                f"Maximum allowed: {MAX_CONFIG_FILE_SIZE:,} bytes"
            )

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse YAML file: {str(e)}")
        except UnicodeDecodeError as e:
            raise ConfigError(f"Invalid file encoding (expected UTF-8): {str(e)}")

        if isinstance(config_dict, dict) and config_dict.get('data_path') is not None:
            data_path = Path(str(config_dict['data_path']))
            if not data_path.is_absolute():
                data_path = config_file.parent / data_path
            config_dict = dict(config_dict, data_path=data_path)

        return cls.from_dict(config_dict)

    def __repr__(self) -> str:
        return (
            f"GeocodesConfig(data_path={str(self.data_path)!r}, "
            f"default_country={self.default_country!r})"
        )
