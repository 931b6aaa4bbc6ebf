"""Custom exceptions for Regionpedia"""

from typing import Optional


class RegionpediaError(Exception):
    """Base exception for all Regionpedia errors"""
    pass


class RegionExpansionError(RegionpediaError, ValueError):
    """Base exception for shorthand region expansion failures

    Attributes:
        region: The input (or the part left after consuming major/minor areas)
        major: Major area resolved before the failure, if any
        minor: Minor area resolved before the failure, if any
    """

    def __init__(
        self,
        message: str,
        region: str,
        major: Optional[str] = None,
        minor: Optional[str] = None
    ):
        super().__init__(message)
        self.region = region
        self.major = major
        self.minor = minor


class TooShortError(RegionExpansionError):
    """Raised when a shorthand region has fewer than two characters"""

    def __init__(self, region: str):
        super().__init__(
            "region too short, needs at least two characters (eg ue)",
            region,
        )


class UnknownMajorAreaError(RegionExpansionError):
    """Raised when the first character does not name a major area"""

    def __init__(self, region: str):
        super().__init__(
            f"unknown region major in {region} "
            "(hint: try using the first letter of the region)",
            region,
        )


class UnknownMinorAreaError(RegionExpansionError):
    """Raised when no minor area follows the major area"""

    def __init__(self, region: str, major: str):
        super().__init__(
            f"unknown region minor in {region!r} (found major: {major})",
            region,
            major=major,
        )


class UnknownSequenceNumberError(RegionExpansionError):
    """Raised when the trailing sequence number is not an integer"""

    def __init__(self, region: str, major: str, minor: str):
        super().__init__(
            f"unknown region number in {region} (found major: {major}, minor: {minor})",
            region,
            major=major,
            minor=minor,
        )


class AWSError(RegionpediaError):
    """Base exception for AWS-related errors"""
    pass


class AWSCredentialsError(AWSError):
    """Raised when AWS credentials are missing or invalid"""
    pass


class AWSConnectionError(AWSError):
    """Raised when unable to connect to AWS"""
    pass


class UnknownRegionError(RegionpediaError):
    """Raised in strict mode when an expanded region is not a known region"""

    def __init__(self, region: str, suggestions: Optional[list[str]] = None):
        message = f"Unknown region '{region}'."
        if suggestions:
            message += f" Did you mean: {', '.join(suggestions)}?"
        message += "\nUse 'regionpedia regions' to see known regions."
        super().__init__(message)
        self.region = region
        self.suggestions = suggestions or []


class ConfigurationError(RegionpediaError):
    """Raised when configuration is invalid"""
    pass
