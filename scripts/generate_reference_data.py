#!/usr/bin/env python3
"""
Generate a geocodes data directory from pycountry.

Writes:
- <output>/countries.yml: every ISO 3166-1 country as [name, code]
- <output>/states/<CODE>.yml: first-level ISO 3166-2 subdivisions as
  [name, code], with the country prefix stripped from each code

Countries are written in name order, subdivisions in code order. Names
follow pycountry, so regenerated data may differ from the bundled files.

Usage:
    python3 scripts/generate_reference_data.py -o geocodes/data -c US CA AU MX BR DE

Requires the 'data' extra (pycountry).

Author: Daniel Edge
"""

import sys
from pathlib import Path

import pycountry
import yaml

# Add parent directory to path to import geocodes
sys.path.insert(0, str(Path(__file__).parent.parent))

from geocodes.core.constants import COUNTRIES_FILE_STEM, STATES_DIR_NAME
from geocodes.reference_data import load_table


def country_rows():
    """[name, code] rows for every ISO 3166-1 country, sorted by name."""
    rows = [[country.name, country.alpha_2] for country in pycountry.countries]
    return sorted(rows, key=lambda row: row[0])


def subdivision_rows(country_code):
    """First-level [name, code] rows for one country, sorted by code."""
    subdivisions = pycountry.subdivisions.get(country_code=country_code) or []
    rows = []
    for subdivision in subdivisions:
        if subdivision.parent_code is not None:
            continue
        # 'US-IL' -> 'IL'
        code = subdivision.code.split('-', 1)[1]
        rows.append([subdivision.name, code])
    return sorted(rows, key=lambda row: row[1])


def write_table(path, rows):
    """Write rows as a YAML list and read it back to check it loads cleanly."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        yaml.safe_dump(rows, f, allow_unicode=True, default_flow_style=None, width=200)

    loaded = load_table(path)
    if len(loaded) != len(rows):
        raise RuntimeError(f"{path}: wrote {len(rows)} rows but loaded {len(loaded)}")
    print(f"✓ Wrote {path} ({len(rows)} rows)")


def generate(output_dir, countries):
    output_dir = Path(output_dir)
    write_table(output_dir / f"{COUNTRIES_FILE_STEM}.yml", country_rows())

    for country_code in countries:
        country_code = country_code.upper()
        if pycountry.countries.get(alpha_2=country_code) is None:
            print(f"✗ Unknown country code: {country_code}")
            continue

        rows = subdivision_rows(country_code)
        if not rows:
            print(f"✗ No subdivisions for {country_code}, skipping")
            continue
        write_table(output_dir / STATES_DIR_NAME / f"{country_code}.yml", rows)


def main():
    import argparse

    parser = argparse.ArgumentParser(description="Generate geocodes reference data from pycountry")
    parser.add_argument(
        "-o", "--output",
        default="data",
        help="Output data directory (default: data)"
    )
    parser.add_argument(
        "-c", "--countries",
        nargs="*",
        default=["US", "CA"],
        help="Countries to write subdivision files for (default: US CA)"
    )

    args = parser.parse_args()
    generate(args.output, args.countries)


if __name__ == "__main__":
    main()
