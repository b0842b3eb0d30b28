"""Override records accepted by the S3WebUI construct.

Each record lists the optional properties a caller may change on one of the
three declared resources. Fields the construct derives itself are not part of
the records at all: the bucket name and index document for the bucket, the
origin for the distribution, and the sources, bucket and distribution for the
deployment.
"""

from dataclasses import dataclass, fields
from typing import Any

from aws_cdk import RemovalPolicy
from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_kms as kms
from aws_cdk import aws_s3 as s3
from aws_cdk import aws_s3_deployment as s3_deploy


class _Overrides:
  """Mixin turning the fields a caller set into construct keyword arguments."""

  def props(self) -> dict[str, Any]:
    """Return the non-``None`` fields as a keyword mapping."""
    values = {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]
    return {name: value for name, value in values.items() if value is not None}


@dataclass(frozen=True)
class BucketOverrides(_Overrides):
  """Optional ``s3.Bucket`` properties."""

  public_read_access: bool | None = None
  removal_policy: RemovalPolicy | None = None
  auto_delete_objects: bool | None = None
  block_public_access: s3.BlockPublicAccess | None = None
  versioned: bool | None = None
  encryption: s3.BucketEncryption | None = None
  encryption_key: kms.IKey | None = None
  enforce_ssl: bool | None = None
  object_ownership: s3.ObjectOwnership | None = None
  cors: list[s3.CorsRule] | None = None
  lifecycle_rules: list[s3.LifecycleRule] | None = None
  server_access_logs_bucket: s3.IBucket | None = None
  server_access_logs_prefix: str | None = None
  event_bridge_enabled: bool | None = None
  website_error_document: str | None = None
  website_routing_rules: list[s3.RoutingRule] | None = None


@dataclass(frozen=True)
class BehaviorOverrides(_Overrides):
  """Optional settings for the distribution's default (catch-all) behavior."""

  viewer_protocol_policy: cloudfront.ViewerProtocolPolicy | None = None
  allowed_methods: cloudfront.AllowedMethods | None = None
  cached_methods: cloudfront.CachedMethods | None = None
  cache_policy: cloudfront.ICachePolicy | None = None
  origin_request_policy: cloudfront.IOriginRequestPolicy | None = None
  response_headers_policy: cloudfront.IResponseHeadersPolicy | None = None
  compress: bool | None = None
  edge_lambdas: list[cloudfront.EdgeLambda] | None = None
  function_associations: list[cloudfront.FunctionAssociation] | None = None


@dataclass(frozen=True)
class DistributionOverrides(_Overrides):
  """Optional ``cloudfront.Distribution`` properties.

  ``default_behavior`` is merged field by field onto the construct's
  catch-all behavior so its origin always stays attached. Every other nested
  value (``geo_restriction``, ``error_responses``, ...) replaces the default
  wholesale.
  """

  default_behavior: BehaviorOverrides | None = None
  comment: str | None = None
  default_root_object: str | None = None
  domain_names: list[str] | None = None
  certificate: acm.ICertificate | None = None
  minimum_protocol_version: cloudfront.SecurityPolicyProtocol | None = None
  price_class: cloudfront.PriceClass | None = None
  http_version: cloudfront.HttpVersion | None = None
  enabled: bool | None = None
  enable_ipv6: bool | None = None
  enable_logging: bool | None = None
  log_bucket: s3.IBucket | None = None
  log_file_prefix: str | None = None
  error_responses: list[cloudfront.ErrorResponse] | None = None
  geo_restriction: cloudfront.GeoRestriction | None = None
  web_acl_id: str | None = None

  def props(self) -> dict[str, Any]:
    """Return the set fields, leaving the behavior record to the construct."""
    values = super().props()
    values.pop("default_behavior", None)
    return values


@dataclass(frozen=True)
class DeploymentOverrides(_Overrides):
  """Optional ``s3_deployment.BucketDeployment`` properties."""

  distribution_paths: list[str] | None = None
  destination_key_prefix: str | None = None
  prune: bool | None = None
  retain_on_delete: bool | None = None
  exclude: list[str] | None = None
  include: list[str] | None = None
  memory_limit: int | None = None
  cache_control: list[s3_deploy.CacheControl] | None = None
