"""Static website on S3 and CloudFront, declared with the AWS CDK."""

from .cdk_constructs import S3WebUI, SiteOutputs
from .merge import merge_right
from .props import (
  BehaviorOverrides,
  BucketOverrides,
  DeploymentOverrides,
  DistributionOverrides,
)

__all__ = [
  "BehaviorOverrides",
  "BucketOverrides",
  "DeploymentOverrides",
  "DistributionOverrides",
  "S3WebUI",
  "SiteOutputs",
  "merge_right",
]
