"""
Tests for the module-level functions and the bundled reference data.
"""

import pytest

import geocodes
from geocodes.core.constants import BUNDLED_DATA_DIR
from tests.testsuite import PRIMARY_DATA_DIR, ALTERNATE_DATA_DIR


@pytest.fixture(autouse=True)
def restore_settings():
    """Module-level settings are process-wide; put them back after each test."""
    config = geocodes.get_service().config
    data_path = geocodes.get_data_path()
    default_country = geocodes.get_default_country()
    yield
    geocodes.configure(config)
    geocodes.set_data_path(data_path)
    geocodes.set_default_country(default_country)


class TestBundledCountries:

    def test_defaults(self):
        assert geocodes.get_data_path() == BUNDLED_DATA_DIR
        assert geocodes.get_default_country() == "US"

    def test_lookups(self):
        assert geocodes.country_name("TV") == "Tuvalu"
        assert geocodes.country_code("Canada") == "CA"
        assert geocodes.country_name("NO") == "Norway"

    def test_unassigned_code(self):
        assert geocodes.country_name("ZZ") is None

    def test_full_iso_list(self):
        codes = geocodes.country_codes()

        assert len(codes) == 249
        assert len(set(codes)) == len(codes)
        assert all(len(code) == 2 and code.isupper() for code in codes)

    def test_listings_aligned(self):
        names = geocodes.country_names()
        codes = geocodes.country_codes()

        assert len(names) == len(codes)
        assert names[codes.index("CA")] == "Canada"

    def test_round_trip(self):
        for code in geocodes.country_codes():
            assert geocodes.country_code(geocodes.country_name(code)) == code
        for name in geocodes.country_names():
            assert geocodes.country_name(geocodes.country_code(name)) == name


class TestBundledStates:

    def test_states_for_us(self):
        states = geocodes.states("US")

        assert len(states) > 50
        assert ("Illinois", "IL") in states
        assert all(isinstance(row, tuple) and len(row) == 2 for row in states)

    def test_state_lookups(self):
        assert geocodes.state_code("Illinois", "US") == "IL"
        assert geocodes.state_name("NH", "US") == "New Hampshire"
        assert geocodes.state_code("Nonexistent Place", "US") is None

    def test_default_country_used(self):
        assert geocodes.state_name("NH") == "New Hampshire"

    def test_set_default_country(self):
        geocodes.set_default_country("CA")

        assert geocodes.state_code("Ontario") == "ON"
        assert "QC" in geocodes.state_codes()

    def test_other_bundled_countries(self):
        assert geocodes.state_name("NSW", "AU") == "New South Wales"
        assert geocodes.state_code("Jalisco", "MX") == "JAL"
        assert geocodes.state_code("São Paulo", "BR") == "SP"
        assert geocodes.state_name("BY", "DE") == "Bayern"
        assert "Yukon" in geocodes.state_names("CA")

    def test_nonexistent_country(self):
        with pytest.raises(geocodes.NonexistentCountry):
            geocodes.states("ZZ")

    def test_states_not_supported(self):
        with pytest.raises(geocodes.StatesNotSupported):
            geocodes.states("AQ")

    def test_states_supported(self):
        assert geocodes.states_supported("US") is True
        assert geocodes.states_supported("AQ") is False
        assert geocodes.states_supported("ZZ") is False

    def test_state_codes_unique_per_country(self):
        for country in ["US", "CA", "AU", "MX", "BR", "DE"]:
            codes = geocodes.state_codes(country)
            assert len(set(codes)) == len(codes), country


class TestSettings:

    def test_set_data_path_reloads(self):
        assert geocodes.country_name("US") == "United States"

        geocodes.set_data_path(ALTERNATE_DATA_DIR)

        assert geocodes.country_name("US") == "United States of America"
        assert geocodes.state_names("MX") == ["Jalisco"]

        geocodes.set_data_path(PRIMARY_DATA_DIR)

        assert geocodes.country_name("US") == "United States"
        assert geocodes.states_supported("MX") is False

    def test_clear_cache_keeps_path(self):
        geocodes.set_data_path(PRIMARY_DATA_DIR)
        geocodes.country_codes()

        geocodes.clear_cache()

        assert geocodes.get_data_path() == PRIMARY_DATA_DIR
        assert geocodes.country_codes() == ["AQ", "CA", "NO", "TV", "US"]

    def test_configure(self):
        geocodes.configure(geocodes.GeocodesConfig(
            data_path=ALTERNATE_DATA_DIR,
            default_country="MX"
        ))

        assert geocodes.get_default_country() == "MX"
        assert geocodes.state_code("Jalisco") == "JAL"
