"""
Country and subdivision lookups over the reference data store.

All lookups are exact, case-sensitive string comparisons. Name/code
resolution is a linear scan in load order, and the first matching record
wins, so earlier rows shadow later duplicates.

Per-record misses return None. Whole-country problems raise
NonexistentCountry or StatesNotSupported.
"""

from typing import Any, Iterable, List, Optional, Sequence

from geocodes.core.config import GeocodesConfig
from geocodes.core.constants import NAME_INDEX, CODE_INDEX
from geocodes.core.exceptions import NonexistentCountry, StatesNotSupported
from geocodes.reference_data.loader import Record


def search_collection(
    collection: Optional[Iterable[Sequence[Any]]],
    value: Any,
    match_index: int,
    retrieve_index: int
) -> Optional[Any]:
    """
    Return ``row[retrieve_index]`` of the first row whose ``row[match_index]``
    equals ``value``.

    Args:
        collection: Ordered rows to scan (None is treated as empty)
        value: Value to match exactly
        match_index: Position compared against value
        retrieve_index: Position returned on a match

    Returns:
        The retrieved value, or None if nothing matches

    Example:
        >>> search_collection([('Canada', 'CA'), ('Chad', 'TD')], 'TD', 1, 0)
        'Chad'
    """
    if collection is None:
        return None
    for row in collection:
        if row[match_index] == value:
            return row[retrieve_index]
    return None


class LookupService:
    """
    Bidirectional name/code lookups for countries and their subdivisions.

    Args:
        config: Data path and default country; a default GeocodesConfig
            (bundled data, default country US) is created if omitted
    """

    def __init__(self, config: Optional[GeocodesConfig] = None):
        self.config = config if config is not None else GeocodesConfig()

    # ------------------------------------------------------------------
    # Countries
    # ------------------------------------------------------------------

    def country_name(self, country_code: str) -> Optional[str]:
        """
        Return the country name for a country code.

            >>> service.country_name('TV')
            'Tuvalu'
        """
        return search_collection(self._countries(), country_code, CODE_INDEX, NAME_INDEX)

    def country_code(self, country_name: str) -> Optional[str]:
        """
        Return the country code for a country name.

            >>> service.country_code('Canada')
            'CA'
        """
        return search_collection(self._countries(), country_name, NAME_INDEX, CODE_INDEX)

    def country_codes(self) -> List[str]:
        """All country codes in load order."""
        return [row[CODE_INDEX] for row in self._countries()]

    def country_names(self) -> List[str]:
        """All country names in load order, aligned with country_codes()."""
        return [row[NAME_INDEX] for row in self._countries()]

    # ------------------------------------------------------------------
    # Subdivisions
    # ------------------------------------------------------------------

    def state_name(self, state_code: str, country_code: Optional[str] = None) -> Optional[str]:
        """
        Return the subdivision name for a code within a country.

            >>> service.state_name('NH', 'US')
            'New Hampshire'

        Raises:
            NonexistentCountry: If the country is not in the country table
            StatesNotSupported: If the country has no subdivision data
        """
        return search_collection(self.states(country_code), state_code, CODE_INDEX, NAME_INDEX)

    def state_code(self, state_name: str, country_code: Optional[str] = None) -> Optional[str]:
        """
        Return the subdivision code for a name within a country.

            >>> service.state_code('Illinois', 'US')
            'IL'

        Raises:
            NonexistentCountry: If the country is not in the country table
            StatesNotSupported: If the country has no subdivision data
        """
        return search_collection(self.states(country_code), state_name, NAME_INDEX, CODE_INDEX)

    def state_names(self, country_code: Optional[str] = None) -> List[str]:
        """Subdivision names for a country, in load order."""
        return [row[NAME_INDEX] for row in self.states(country_code)]

    def state_codes(self, country_code: Optional[str] = None) -> List[str]:
        """Subdivision codes for a country, in load order."""
        return [row[CODE_INDEX] for row in self.states(country_code)]

    def states(self, country_code: Optional[str] = None) -> List[Record]:
        """
        Return (name, code) pairs for a country's subdivisions.

        Args:
            country_code: Country code (default: the configured default country)

        Returns:
            List of (name, code) tuples in load order

        Raises:
            NonexistentCountry: If the country is not in the country table
            StatesNotSupported: If the country exists but has no subdivision data
        """
        country_code = self._resolve_country(country_code)
        if country_code not in self.country_codes():
            raise NonexistentCountry(country_code)
        if not self.states_supported(country_code):
            raise StatesNotSupported(country_code)
        return list(self.config.store.get_subdivision_table()[country_code])

    def states_supported(self, country_code: Optional[str] = None) -> bool:
        """
        Whether subdivision data exists for a country. Never raises for
        unknown countries.

            >>> service.states_supported('US')
            True
            >>> service.states_supported('ZZ')
            False
        """
        country_code = self._resolve_country(country_code)
        return country_code in self.config.store.get_subdivision_table()

    # ------------------------------------------------------------------

    def _countries(self) -> List[Record]:
        return self.config.store.get_country_table()

    def _resolve_country(self, country_code: Optional[str]) -> str:
        if country_code is None:
            return self.config.default_country
        return country_code
