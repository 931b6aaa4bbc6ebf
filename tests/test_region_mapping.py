"""Tests for region_mapping module"""

from regionpedia.models.region import expand_region
from regionpedia.models.region_mapping import (
    REGION_MAP,
    get_region_list,
    get_region_name,
    is_known_region,
)


class TestRegionMapping:
    """Tests for region mapping functionality"""

    def test_region_map_structure(self):
        """Test that REGION_MAP maps region codes to location names"""
        assert len(REGION_MAP) > 0
        for region_code, location_name in REGION_MAP.items():
            assert isinstance(region_code, str)
            assert isinstance(location_name, str)
            assert region_code.count('-') >= 2
            assert len(location_name) > 0

    def test_every_known_region_has_shorthand(self):
        """Test that each known region is reachable by expanding shorthand"""
        for region_code in REGION_MAP:
            major, minor, number = region_code.rsplit('-', 2)
            # Build the longest shorthand for the region
            major_code = {"us-gov": "ug"}.get(major, major)
            minor_code = {
                "north": "n", "south": "s", "east": "e", "west": "w", "central": "c",
                "northeast": "ne", "northwest": "nw", "southeast": "se", "southwest": "sw",
            }[minor]
            assert expand_region(f"{major_code}{minor_code}{number}") == region_code

    def test_get_region_name_known_region(self):
        """Test get_region_name with known region code"""
        assert get_region_name('us-east-1') == 'US East (N. Virginia)'
        assert get_region_name('eu-west-1') == 'EU (Ireland)'
        assert get_region_name('us-gov-west-1') == 'AWS GovCloud (US-West)'

    def test_get_region_name_unknown_region(self):
        """Test get_region_name falls back to the code"""
        assert get_region_name('ap-south-9') == 'ap-south-9'
        assert get_region_name('') == ''

    def test_is_known_region(self):
        """Test is_known_region"""
        assert is_known_region('cn-northwest-1') is True
        assert is_known_region('ap-south-9') is False
        assert is_known_region('US-EAST-1') is False

    def test_get_region_list_sorted(self):
        """Test that get_region_list returns sorted (code, name) tuples"""
        result = get_region_list()
        assert len(result) == len(REGION_MAP)
        codes = [code for code, _ in result]
        assert codes == sorted(codes)
        assert ('us-east-1', 'US East (N. Virginia)') in result
