"""AWS region catalogue backed by boto3"""

import boto3
import logging
from difflib import get_close_matches
from typing import Optional
from botocore.exceptions import ClientError, NoCredentialsError, BotoCoreError, ProfileNotFound

from regionpedia.exceptions import (
    AWSCredentialsError,
    AWSConnectionError,
    UnknownRegionError,
)
from regionpedia.models.region import DEFAULT_REGION
from regionpedia.models.region_mapping import REGION_MAP

logger = logging.getLogger("regionpedia")

PARTITIONS = ("aws", "aws-us-gov", "aws-cn")


class RegionService:
    """Looks up which regions exist, either offline or for an account"""

    def __init__(self, profile: Optional[str] = None):
        """
        Initialize region service

        Args:
            profile: Optional AWS profile name
        """
        self.profile = profile
        self._partition_regions: dict[str, list[str]] = {}

    def _get_session(self):
        """Get boto3 session"""
        if self.profile:
            try:
                return boto3.Session(profile_name=self.profile)
            except ProfileNotFound as e:
                logger.error(f"AWS profile '{self.profile}' not found")
                raise AWSCredentialsError(f"AWS profile '{self.profile}' not found") from e
        return boto3.Session()

    def get_partition_regions(self, service: str = "ec2") -> list[str]:
        """
        Get regions botocore knows about for a service, across all partitions.

        Uses the endpoint data bundled with botocore, so no credentials or
        network access are needed.

        Args:
            service: Service name whose endpoints are listed

        Returns:
            Sorted list of region codes
        """
        if service not in self._partition_regions:
            session = self._get_session()
            regions: set[str] = set()
            for partition in PARTITIONS:
                regions.update(
                    session.get_available_regions(service, partition_name=partition)
                )
            logger.debug(f"botocore lists {len(regions)} regions for {service}")
            self._partition_regions[service] = sorted(regions)
        return self._partition_regions[service]

    def get_accessible_regions(self) -> list[str]:
        """
        Get list of regions that are enabled for the current AWS account.

        Returns:
            List of region codes that are accessible

        Raises:
            AWSCredentialsError: If credentials are missing or invalid
            AWSConnectionError: If unable to connect to AWS
        """
        try:
            session = self._get_session()
            ec2 = session.client("ec2", region_name=DEFAULT_REGION)
            # describe_regions() only returns regions enabled for the account
            response = ec2.describe_regions()
            accessible_regions = [region["RegionName"] for region in response["Regions"]]
            logger.debug(f"Found {len(accessible_regions)} accessible regions")
            return accessible_regions
        except NoCredentialsError as e:
            logger.error("AWS credentials not found when listing regions")
            raise AWSCredentialsError("AWS credentials not found") from e
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to get accessible regions: {e}")
            raise AWSConnectionError(f"Failed to get accessible regions: {str(e)}") from e

    def is_known(self, region: str) -> bool:
        """Check a region against REGION_MAP and the botocore catalogue"""
        if region in REGION_MAP:
            return True
        return region in self.get_partition_regions()

    def suggest(self, region: str, limit: int = 3) -> list[str]:
        """Suggest known regions with a similar name"""
        candidates = sorted(set(REGION_MAP) | set(self.get_partition_regions()))
        similar = [r for r in candidates if region in r or r in region]
        if not similar:
            similar = get_close_matches(region, candidates, n=limit)
        return similar[:limit]

    def check_region(self, region: str) -> str:
        """
        Ensure a fully qualified region is known.

        Raises:
            UnknownRegionError: If the region is not known
        """
        if not self.is_known(region):
            logger.warning(f"Region '{region}' is not a known AWS region")
            raise UnknownRegionError(region, self.suggest(region))
        return region
