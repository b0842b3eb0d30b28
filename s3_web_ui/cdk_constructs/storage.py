"""S3 bucket for static website hosting."""

from aws_cdk import RemovalPolicy
from aws_cdk import aws_s3 as s3
from constructs import Construct

from ..merge import merge_right
from ..props import BucketOverrides

# Public read needs bucket-level public access left open.
OPEN_PUBLIC_ACCESS = s3.BlockPublicAccess(
  block_public_acls=False,
  ignore_public_acls=False,
  block_public_policy=False,
  restrict_public_buckets=False,
)


class StorageBucket(Construct):
  """Public-read S3 bucket serving ``index_document`` as a website."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket_name: str,
    index_document: str,
    overrides: BucketOverrides | None = None,
  ) -> None:
    super().__init__(scope, id)

    defaults = {
      "public_read_access": True,
      "removal_policy": RemovalPolicy.DESTROY,
    }
    props = merge_right(defaults, overrides.props() if overrides else None)

    # Settings CDK only accepts in combination with the merged values above
    if "block_public_access" not in props:
      props["block_public_access"] = (
        OPEN_PUBLIC_ACCESS
        if props["public_read_access"]
        else s3.BlockPublicAccess.BLOCK_ALL
      )
    if "auto_delete_objects" not in props:
      props["auto_delete_objects"] = props["removal_policy"] == RemovalPolicy.DESTROY

    self.props = props
    self.bucket = s3.Bucket(
      self,
      "Bucket",
      bucket_name=bucket_name,
      website_index_document=index_document,
      **props,
    )
