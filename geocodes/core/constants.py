"""
geocodes Constants.

Defaults, file layout names and limits used by the reference data store
and the lookup service.

Author: Daniel Edge
"""

from pathlib import Path

# ============================================================================
# Lookup Defaults
# ============================================================================

# Country used by subdivision lookups when the caller passes none
DEFAULT_COUNTRY: str = "US"

# Positions within a (name, code) record
NAME_INDEX: int = 0
CODE_INDEX: int = 1


# ============================================================================
# Data Directory Layout
# ============================================================================

# Data shipped inside the package, used until a caller sets another path
BUNDLED_DATA_DIR: Path = Path(__file__).resolve().parent.parent / "data"

# <base>/countries.yml
COUNTRIES_FILE_STEM: str = "countries"

# <base>/states/<CODE>.yml
STATES_DIR_NAME: str = "states"

# Recognised data file extensions (compared case-insensitively).
# First entry is preferred when both exist for the countries file.
DATA_FILE_EXTENSIONS: tuple = (".yml", ".yaml")


# ============================================================================
# Load Limits
# ============================================================================

# Maximum size of a single data file (5MB)
# The full ISO 3166-1 list is ~10KB, so anything this large is not reference data
MAX_DATA_FILE_SIZE: int = 5 * 1024 * 1024

# Maximum YAML configuration file size (1MB)
MAX_CONFIG_FILE_SIZE: int = 1024 * 1024


# ============================================================================
# Cache Keys
# ============================================================================

COUNTRY_TABLE_KEY: str = "countries"
SUBDIVISION_TABLE_KEY: str = "states"
