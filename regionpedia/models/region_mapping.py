"""Known AWS region codes and their location names.

Expansion never consults this table; it is an optional allow-list that
callers can layer on top of expanded regions (see ``--strict``).
"""

# Map AWS region codes to location names
REGION_MAP = {
    'us-east-1': 'US East (N. Virginia)',
    'us-east-2': 'US East (Ohio)',
    'us-west-1': 'US West (N. California)',
    'us-west-2': 'US West (Oregon)',
    'us-gov-east-1': 'AWS GovCloud (US-East)',
    'us-gov-west-1': 'AWS GovCloud (US-West)',
    'af-south-1': 'Africa (Cape Town)',
    'ap-east-1': 'Asia Pacific (Hong Kong)',
    'ap-south-1': 'Asia Pacific (Mumbai)',
    'ap-south-2': 'Asia Pacific (Hyderabad)',
    'ap-northeast-1': 'Asia Pacific (Tokyo)',
    'ap-northeast-2': 'Asia Pacific (Seoul)',
    'ap-northeast-3': 'Asia Pacific (Osaka)',
    'ap-southeast-1': 'Asia Pacific (Singapore)',
    'ap-southeast-2': 'Asia Pacific (Sydney)',
    'ap-southeast-3': 'Asia Pacific (Jakarta)',
    'ap-southeast-4': 'Asia Pacific (Melbourne)',
    'ap-southeast-5': 'Asia Pacific (Malaysia)',
    'ca-central-1': 'Canada (Central)',
    'ca-west-1': 'Canada West (Calgary)',
    'cn-north-1': 'China (Beijing)',
    'cn-northwest-1': 'China (Ningxia)',
    'eu-central-1': 'EU (Frankfurt)',
    'eu-central-2': 'EU (Zurich)',
    'eu-west-1': 'EU (Ireland)',
    'eu-west-2': 'EU (London)',
    'eu-west-3': 'EU (Paris)',
    'eu-north-1': 'EU (Stockholm)',
    'eu-south-1': 'EU (Milan)',
    'eu-south-2': 'EU (Spain)',
    'me-south-1': 'Middle East (Bahrain)',
    'me-central-1': 'Middle East (UAE)',
    'sa-east-1': 'South America (Sao Paulo)',
}


def get_region_name(region_code: str) -> str:
    """Get the location name for an AWS region code.

    Args:
        region_code: AWS region code (e.g., 'us-east-1')

    Returns:
        Location name (e.g., 'US East (N. Virginia)')
        Returns the region_code itself if no mapping exists.
    """
    return REGION_MAP.get(region_code, region_code)


def is_known_region(region_code: str) -> bool:
    """Check whether a region code is in REGION_MAP"""
    return region_code in REGION_MAP


def get_region_list() -> list[tuple[str, str]]:
    """Get (code, name) pairs for all known regions, sorted by code"""
    return sorted(REGION_MAP.items())
