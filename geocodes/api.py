"""
Module-level lookup functions backed by one process-wide LookupService.

The service and its GeocodesConfig are created once, when this module is
imported. Callers change settings through set_data_path() and
set_default_country(), or swap in a whole config with configure().

    >>> import geocodes
    >>> geocodes.country_name('CA')
    'Canada'
    >>> geocodes.state_code('Illinois')
    'IL'
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from geocodes.core.config import GeocodesConfig
from geocodes.lookup import LookupService
from geocodes.reference_data.loader import Record

logger = logging.getLogger(__name__)

_service = LookupService(GeocodesConfig())


def get_service() -> LookupService:
    """Return the process-wide LookupService."""
    return _service


def configure(config: GeocodesConfig) -> None:
    """Replace the process-wide configuration (and its cache)."""
    _service.config = config
    logger.debug(f"Configured {config!r}")


def get_data_path() -> Path:
    return _service.config.data_path


def set_data_path(path: Union[str, Path]) -> None:
    """Load reference data from ``path`` from now on. Cached tables are dropped."""
    _service.config.data_path = path


def get_default_country() -> str:
    return _service.config.default_country


def set_default_country(country_code: str) -> None:
    _service.config.default_country = country_code


def clear_cache() -> None:
    """Drop cached tables without changing the data path."""
    _service.config.store.invalidate()


def country_name(country_code: str) -> Optional[str]:
    return _service.country_name(country_code)


def country_code(country_name: str) -> Optional[str]:
    return _service.country_code(country_name)


def country_codes() -> List[str]:
    return _service.country_codes()


def country_names() -> List[str]:
    return _service.country_names()


def state_name(state_code: str, country_code: Optional[str] = None) -> Optional[str]:
    return _service.state_name(state_code, country_code)


def state_code(state_name: str, country_code: Optional[str] = None) -> Optional[str]:
    return _service.state_code(state_name, country_code)


def state_names(country_code: Optional[str] = None) -> List[str]:
    return _service.state_names(country_code)


def state_codes(country_code: Optional[str] = None) -> List[str]:
    return _service.state_codes(country_code)


def states(country_code: Optional[str] = None) -> List[Record]:
    return _service.states(country_code)


def states_supported(country_code: Optional[str] = None) -> bool:
    return _service.states_supported(country_code)
