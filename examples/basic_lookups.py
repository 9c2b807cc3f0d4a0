#!/usr/bin/env python3
"""
Look up countries and states with geocodes.

Uses the bundled data unless a data directory is given:

    python3 examples/basic_lookups.py [DATA_DIR]

Author: Daniel Edge
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import geocodes


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if len(sys.argv) > 1:
        geocodes.set_data_path(sys.argv[1])

    print(f"Data path: {geocodes.get_data_path()}")
    print(f"{len(geocodes.country_codes())} countries")
    print(f"CA -> {geocodes.country_name('CA')}")
    print(f"Illinois -> {geocodes.state_code('Illinois')}")

    for country in ["US", "AQ", "ZZ"]:
        try:
            print(f"{country}: {len(geocodes.states(country))} states")
        except geocodes.StatesNotSupported:
            print(f"{country}: no state data")
        except geocodes.NonexistentCountry:
            print(f"{country}: not a country")

    return 0


if __name__ == "__main__":
    sys.exit(main())
