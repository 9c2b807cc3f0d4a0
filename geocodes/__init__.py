"""
geocodes: country and subdivision names and codes.

Bidirectional lookups over static reference tables loaded lazily from a
data directory (bundled ISO 3166-1 countries plus subdivisions for a set of
countries by default).
"""

from geocodes.api import (
    clear_cache,
    configure,
    country_code,
    country_codes,
    country_name,
    country_names,
    get_data_path,
    get_default_country,
    get_service,
    set_data_path,
    set_default_country,
    state_code,
    state_codes,
    state_name,
    state_names,
    states,
    states_supported,
)
from geocodes.core.config import GeocodesConfig
from geocodes.core.exceptions import (
    GeocodesException,
    ConfigError,
    DataLoadError,
    CountryError,
    NonexistentCountry,
    StatesNotSupported,
)
from geocodes.lookup import LookupService

__version__ = "0.1.0"

__all__ = [
    'GeocodesConfig', 'LookupService',
    'GeocodesException', 'ConfigError', 'DataLoadError', 'CountryError',
    'NonexistentCountry', 'StatesNotSupported',
    'clear_cache', 'configure', 'get_service',
    'get_data_path', 'set_data_path', 'get_default_country', 'set_default_country',
    'country_name', 'country_code', 'country_codes', 'country_names',
    'state_name', 'state_code', 'state_names', 'state_codes',
    'states', 'states_supported',
]
