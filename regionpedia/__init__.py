"""Regionpedia - expand shorthand AWS region codes"""

from regionpedia.models.region import DEFAULT_REGION, expand_region, parse_region

__version__ = "0.1.0"

__all__ = ["DEFAULT_REGION", "expand_region", "parse_region", "__version__"]
