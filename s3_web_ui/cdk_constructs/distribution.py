"""CloudFront distribution for static website."""

from typing import Any

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_s3 as s3
from constructs import Construct

from ..merge import merge_right
from ..props import DistributionOverrides


def default_behavior_props() -> dict[str, Any]:
  """Settings of the catch-all behavior, origin excluded."""
  return {
    "viewer_protocol_policy": cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
    "allowed_methods": cloudfront.AllowedMethods.ALLOW_GET_HEAD,
    "cached_methods": cloudfront.CachedMethods.CACHE_GET_HEAD,
  }


class CloudFrontDistribution(Construct):
  """CloudFront distribution with a single S3 static website origin."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    overrides: DistributionOverrides | None = None,
  ) -> None:
    super().__init__(scope, id)

    behavior_overrides = overrides.default_behavior if overrides else None
    behavior = merge_right(
      default_behavior_props(),
      behavior_overrides.props() if behavior_overrides else None,
    )

    self.origin = origins.S3StaticWebsiteOrigin(bucket)
    defaults = {
      "default_behavior": cloudfront.BehaviorOptions(origin=self.origin, **behavior),
    }
    self.props = merge_right(defaults, overrides.props() if overrides else None)

    self.distribution = cloudfront.Distribution(self, "Distribution", **self.props)
