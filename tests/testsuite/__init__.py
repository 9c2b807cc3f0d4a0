"""
geocodes Test Suite - Centralized test data.

Directory Structure:
    testsuite/
    └── data/
        └── reference/
            ├── primary/       # Small data set with mixed-case state files
            ├── alternate/     # Different data for base-path switching tests
            ├── duplicates/    # Country table with a repeated code and name
            ├── malformed/     # countries.yml that is not valid YAML
            └── no_states/     # Countries only, no states/ directory

Usage:
    from tests.testsuite import PRIMARY_DATA_DIR
    config = GeocodesConfig(data_path=PRIMARY_DATA_DIR)
"""

from pathlib import Path

# Base directory for all test suite data
TESTSUITE_DATA_DIR = Path(__file__).parent / "data"

REFERENCE_DATA_DIR = TESTSUITE_DATA_DIR / "reference"

PRIMARY_DATA_DIR = REFERENCE_DATA_DIR / "primary"
ALTERNATE_DATA_DIR = REFERENCE_DATA_DIR / "alternate"
DUPLICATES_DATA_DIR = REFERENCE_DATA_DIR / "duplicates"
MALFORMED_DATA_DIR = REFERENCE_DATA_DIR / "malformed"
NO_STATES_DATA_DIR = REFERENCE_DATA_DIR / "no_states"
