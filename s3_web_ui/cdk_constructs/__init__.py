"""CDK constructs for static website infrastructure."""

from .deployment import SiteDeployment
from .distribution import CloudFrontDistribution
from .storage import StorageBucket
from .web_ui import S3WebUI, SiteOutputs

__all__ = [
  "CloudFrontDistribution",
  "S3WebUI",
  "SiteDeployment",
  "SiteOutputs",
  "StorageBucket",
]
