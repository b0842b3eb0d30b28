"""Composite construct for a static website served through CloudFront."""

import logging
from dataclasses import dataclass

from aws_cdk import CfnOutput
from constructs import Construct

from ..props import BucketOverrides, DeploymentOverrides, DistributionOverrides
from .deployment import SiteDeployment
from .distribution import CloudFrontDistribution
from .storage import StorageBucket

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SiteOutputs:
  """Stack outputs published by ``S3WebUI``."""

  bucket_name: CfnOutput
  distribution_id: CfnOutput
  distribution_domain_name: CfnOutput


class S3WebUI(Construct):
  """Static website infrastructure.

  Creates, in this order:
  - S3 bucket with public read access and website hosting
  - CloudFront distribution using the bucket's website endpoint as its only origin
  - Bucket deployment uploading the build directory and invalidating the
    distribution

  The bucket name, index document and origin are always derived from the
  arguments below; the override records cannot express them.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket_name: str,
    static_site_entry: str,
    static_site_build_path: str,
    bucket_props: BucketOverrides | None = None,
    cloudfront_props: DistributionOverrides | None = None,
    deployment_props: DeploymentOverrides | None = None,
  ) -> None:
    super().__init__(scope, id)

    # Storage
    self.storage = StorageBucket(
      self,
      "Storage",
      bucket_name=bucket_name,
      index_document=static_site_entry,
      overrides=bucket_props,
    )
    self.bucket = self.storage.bucket
    logger.debug("Bucket %s declared with %s", bucket_name, sorted(self.storage.props))

    # CloudFront Distribution
    self.cdn = CloudFrontDistribution(
      self,
      "Cdn",
      bucket=self.bucket,
      overrides=cloudfront_props,
    )
    self.distribution = self.cdn.distribution

    # Build upload, invalidating the distribution afterwards
    self.site_deployment = SiteDeployment(
      self,
      "Deployment",
      build_path=static_site_build_path,
      bucket=self.bucket,
      distribution=self.distribution,
      overrides=deployment_props,
    )
    self.deployment = self.site_deployment.deployment
    logger.debug("Deployment of %s into %s declared", static_site_build_path, bucket_name)

    # Outputs
    self.outputs = SiteOutputs(
      bucket_name=CfnOutput(
        self,
        "BucketName",
        value=self.bucket.bucket_name,
        description="S3 bucket name",
      ),
      distribution_id=CfnOutput(
        self,
        "DistributionId",
        value=self.distribution.distribution_id,
        description="CloudFront distribution ID",
      ),
      distribution_domain_name=CfnOutput(
        self,
        "DistributionDomainName",
        value=self.distribution.distribution_domain_name,
        description="CloudFront distribution domain name",
      ),
    )
