"""Upload of the site build into the bucket."""

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_s3 as s3
from aws_cdk import aws_s3_deployment as s3_deploy
from constructs import Construct

from ..merge import merge_right
from ..props import DeploymentOverrides


class SiteDeployment(Construct):
  """Copies a local build directory to S3, then invalidates the distribution."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    build_path: str,
    bucket: s3.IBucket,
    distribution: cloudfront.IDistribution,
    overrides: DeploymentOverrides | None = None,
  ) -> None:
    super().__init__(scope, id)

    defaults = {"distribution_paths": ["/*"]}
    props = merge_right(defaults, overrides.props() if overrides else None)

    self.deployment = s3_deploy.BucketDeployment(
      self,
      "Deployment",
      sources=[s3_deploy.Source.asset(str(build_path))],
      destination_bucket=bucket,
      distribution=distribution,
      **props,
    )
