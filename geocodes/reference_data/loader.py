"""
YAML table loader for country and subdivision reference data.

Every data file is a YAML list of two-element rows::

    - ["Canada", "CA"]
    - ["Cape Verde", "CV"]

Rows are returned as (name, code) tuples in file order. Nothing is sorted
or de-duplicated: reverse lookups are first-match-wins, so file order is
significant.

Codes must be quoted in the YAML source. Unquoted ``NO`` parses as a
boolean and unquoted ``01`` as an integer, both of which are rejected.
"""

import logging
import os
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import yaml

from geocodes.core.constants import (
    DATA_FILE_EXTENSIONS,
    MAX_DATA_FILE_SIZE,
)
from geocodes.core.exceptions import (
    DataLoadError,
    DataFileSizeError,
    ReferenceFileNotFoundError,
)

logger = logging.getLogger(__name__)

Record = Tuple[str, str]
Table = List[Record]


def derive_country_code(file_name: str) -> Optional[str]:
    """
    Derive a country code from a subdivision file name.

    The recognised extension is stripped (case-insensitive) and the stem
    upper-cased. Names without a recognised extension, or with an empty
    stem, yield None.

    Examples:
        >>> derive_country_code('us.yml')
        'US'
        >>> derive_country_code('Ca.YAML')
        'CA'
        >>> derive_country_code('CA.yml.bak') is None
        True
    """
    name = Path(file_name).name
    lowered = name.lower()
    for extension in DATA_FILE_EXTENSIONS:
        if lowered.endswith(extension):
            stem = name[:-len(extension)].strip()
            return stem.upper() if stem else None
    return None


def load_table(path: Union[str, Path]) -> Table:
    """
    Load one YAML data file into an ordered list of (name, code) tuples.

    Args:
        path: Path to the YAML file

    Returns:
        List of (name, code) tuples in file order. An empty file gives [].

    Raises:
        ReferenceFileNotFoundError: If the file does not exist
        DataFileSizeError: If the file exceeds MAX_DATA_FILE_SIZE
        DataLoadError: If the file is unreadable, not valid YAML, or not a
            list of [name, code] string pairs
    """
    path = Path(path)
    if not path.is_file():
        raise ReferenceFileNotFoundError(str(path))

    file_size = os.path.getsize(path)
    if file_size > MAX_DATA_FILE_SIZE:
        raise DataFileSizeError(str(path), file_size, MAX_DATA_FILE_SIZE)

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DataLoadError(f"Failed to parse YAML file: {str(e)}", str(path), e)
    except UnicodeDecodeError as e:
        raise DataLoadError(f"Invalid file encoding (expected UTF-8): {str(e)}", str(path), e)
    except OSError as e:
        raise DataLoadError(f"Could not read data file: {str(e)}", str(path), e)

    if raw is None:
        return []

    if not isinstance(raw, list):
        raise DataLoadError(
            f"Expected a list of [name, code] rows, got {type(raw).__name__}",
            str(path)
        )

    table = []
    for row_number, row in enumerate(raw, start=1):
        if not isinstance(row, (list, tuple)) or len(row) != 2:
            raise DataLoadError(
                f"Row {row_number} is not a [name, code] pair: {row!r}",
                str(path)
            )
        name, code = row
        if not isinstance(name, str) or not isinstance(code, str):
            raise DataLoadError(
                f"Row {row_number} must contain two strings, got {row!r} "
                f"(quote codes such as \"NO\" or \"01\" in the YAML source)",
                str(path)
            )
        table.append((name, code))

    logger.debug(f"Loaded {len(table)} records from {path}")
    return table


def find_data_file(directory: Union[str, Path], stem: str) -> Path:
    """
    Locate ``<directory>/<stem>.<ext>`` for the first recognised extension.

    Raises:
        ReferenceFileNotFoundError: If no candidate exists
    """
    directory = Path(directory)
    candidates = [directory / f"{stem}{extension}" for extension in DATA_FILE_EXTENSIONS]
    for candidate in candidates:
        if candidate.is_file():
            return candidate

    raise ReferenceFileNotFoundError(
        str(candidates[0]),
        searched_paths=[str(c) for c in candidates]
    )


def scan_subdivision_files(states_dir: Union[str, Path]) -> Dict[str, Table]:
    """
    Build the country subdivision table from a directory of YAML files.

    Entries are visited in sorted file-name order. Each file's key is
    derived with derive_country_code(); files it rejects are skipped. If two
    files map to the same key (``us.yml`` and ``US.yaml``), the first one
    wins and a warning is logged.

    Args:
        states_dir: Directory holding one file per supported country

    Returns:
        Dict mapping upper-case country code to its (name, code) records.
        A missing directory gives an empty dict.
    """
    states_dir = Path(states_dir)
    if not states_dir.is_dir():
        logger.debug(f"No subdivision directory at {states_dir}")
        return {}

    table: Dict[str, Table] = {}
    sources: Dict[str, Path] = {}
    for entry in sorted(states_dir.iterdir(), key=lambda p: p.name):
        if not entry.is_file():
            continue

        country_code = derive_country_code(entry.name)
        if country_code is None:
            logger.debug(f"Skipping non-data file {entry}")
            continue

        if country_code in table:
            logger.warning(
                f"Ignoring {entry}: subdivisions for {country_code} "
                f"already loaded from {sources[country_code]}"
            )
            continue

        table[country_code] = load_table(entry)
        sources[country_code] = entry

    logger.debug(f"Loaded subdivisions for {len(table)} countries from {states_dir}")
    return table
