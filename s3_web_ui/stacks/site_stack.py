"""CDK stack for a single static website."""

from typing import Any

import aws_cdk as cdk
from constructs import Construct

from s3_web_ui.cdk_constructs import S3WebUI
from s3_web_ui.config import SiteConfig


class StaticSiteStack(cdk.Stack):
  """Stack for a single static website."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    site_config: SiteConfig,
    **kwargs: Any,
  ) -> None:
    super().__init__(scope, id, **kwargs)

    self.site = S3WebUI(
      self,
      "Site",
      bucket_name=site_config.bucket_name,
      static_site_entry=site_config.site_entry,
      static_site_build_path=site_config.build_path,
      bucket_props=site_config.bucket,
      cloudfront_props=site_config.cloudfront,
      deployment_props=site_config.deployment,
    )

    # Tag resources
    cdk.Tags.of(self).add("Project", "static-sites")
    cdk.Tags.of(self).add("Site", site_config.bucket_name)
    if site_config.owner:
      cdk.Tags.of(self).add("Owner", site_config.owner)
