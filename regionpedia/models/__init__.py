"""Region models"""

from .region import (
    DEFAULT_REGION,
    MAJOR_AREAS,
    MINOR_AREAS,
    RegionParts,
    expand_region,
    expand_regions,
    is_shorthand,
    parse_region,
)
from .region_mapping import REGION_MAP, get_region_list, get_region_name, is_known_region

__all__ = [
    "DEFAULT_REGION",
    "MAJOR_AREAS",
    "MINOR_AREAS",
    "RegionParts",
    "expand_region",
    "expand_regions",
    "is_shorthand",
    "parse_region",
    "REGION_MAP",
    "get_region_list",
    "get_region_name",
    "is_known_region",
]
