"""
Reference data store with lazy loading and path-scoped caching.

Holds the two tables read from a base directory:

- the country table, from ``<base>/countries.yml``
- the country subdivision table, from ``<base>/states/*.yml``

Each table is read on first access and kept until the base path changes.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Union

from geocodes.core.constants import (
    COUNTRIES_FILE_STEM,
    STATES_DIR_NAME,
    COUNTRY_TABLE_KEY,
    SUBDIVISION_TABLE_KEY,
)
from geocodes.reference_data.loader import (
    Table,
    find_data_file,
    load_table,
    scan_subdivision_files,
)

logger = logging.getLogger(__name__)


class ReferenceDataStore:
    """
    Lazily loaded, path-scoped cache of country and subdivision tables.

    Setting ``base_path`` clears both tables; nothing is reloaded until the
    next read. Load errors propagate to the caller and leave the cache
    empty, so the next read retries from disk.

    Not thread-safe. Configure the path once at startup, or synchronise
    externally.
    """

    def __init__(self, base_path: Union[str, Path]):
        self._base_path = Path(base_path)
        self._cache: Dict[str, Any] = {}

    @property
    def base_path(self) -> Path:
        return self._base_path

    @base_path.setter
    def base_path(self, path: Union[str, Path]) -> None:
        self.set_base_path(path)

    def set_base_path(self, path: Union[str, Path]) -> None:
        """Point the store at a new data directory and drop cached tables."""
        self._base_path = Path(path)
        self.invalidate()

    def invalidate(self) -> None:
        """Clear all cached tables."""
        if self._cache:
            logger.debug(f"Invalidating cached tables: {sorted(self._cache)}")
        self._cache.clear()

    def is_loaded(self, key: str) -> bool:
        """Whether the table stored under ``key`` is currently cached."""
        return key in self._cache

    def get_or_load(self, key: str, loader: Callable[[], Any]) -> Any:
        """
        Return the cached value for ``key``, loading and storing it if absent.

        Args:
            key: Cache key
            loader: Zero-argument callable producing the value

        Returns:
            The cached or freshly loaded value
        """
        if key in self._cache:
            return self._cache[key]

        value = loader()
        self._cache[key] = value
        return value

    def get_country_table(self) -> Table:
        """
        Get the country table as an ordered list of (name, code) tuples.

        Raises:
            DataLoadError: If the countries file is missing or malformed
        """
        return self.get_or_load(COUNTRY_TABLE_KEY, self._load_countries)

    def get_subdivision_table(self) -> Dict[str, Table]:
        """
        Get the subdivision table, keyed by upper-case country code.

        Countries without a file under ``states/`` are absent.

        Raises:
            DataLoadError: If any subdivision file is malformed
        """
        return self.get_or_load(SUBDIVISION_TABLE_KEY, self._load_subdivisions)

    def _load_countries(self) -> Table:
        path = find_data_file(self._base_path, COUNTRIES_FILE_STEM)
        logger.debug(f"Loading country table from {path}")
        return load_table(path)

    def _load_subdivisions(self) -> Dict[str, Table]:
        states_dir = self._base_path / STATES_DIR_NAME
        logger.debug(f"Loading subdivision table from {states_dir}")
        return scan_subdivision_files(states_dir)

    def get_data_source_info(self) -> Dict[str, Any]:
        """
        Get provenance information about the loaded data.

        Loads both tables if they are not cached yet.

        Returns:
            Dict with source paths and record counts for audit purposes
        """
        countries = self.get_country_table()
        subdivisions = self.get_subdivision_table()
        return {
            'base_path': str(self._base_path),
            'sources': {
                'countries': {
                    'path': str(find_data_file(self._base_path, COUNTRIES_FILE_STEM)),
                    'record_count': len(countries)
                },
                'states': {
                    'path': str(self._base_path / STATES_DIR_NAME),
                    'country_count': len(subdivisions),
                    'record_count': sum(len(rows) for rows in subdivisions.values())
                }
            }
        }
