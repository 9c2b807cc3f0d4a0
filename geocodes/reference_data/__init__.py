"""
Reference data loading for geocodes.

Provides the country and subdivision tables from a data directory:
- ``countries.yml``: ordered [name, code] rows for every country
- ``states/<CODE>.yml``: ordered [name, code] rows for one country's subdivisions

All tables are loaded lazily and cached until the data directory changes.
"""

from geocodes.reference_data.loader import derive_country_code, load_table, scan_subdivision_files
from geocodes.reference_data.store import ReferenceDataStore

__all__ = ['ReferenceDataStore', 'derive_country_code', 'load_table', 'scan_subdivision_files']
