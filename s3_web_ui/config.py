"""Configuration loader for multi-site management."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from aws_cdk import RemovalPolicy
from aws_cdk import aws_cloudfront as cloudfront

from .merge import merge_right
from .props import BucketOverrides, DeploymentOverrides, DistributionOverrides

logger = logging.getLogger(__name__)

REMOVAL_POLICIES = {
  "retain": RemovalPolicy.RETAIN,
  "destroy": RemovalPolicy.DESTROY,
  "snapshot": RemovalPolicy.SNAPSHOT,
}

PRICE_CLASSES = {
  "100": cloudfront.PriceClass.PRICE_CLASS_100,
  "200": cloudfront.PriceClass.PRICE_CLASS_200,
  "all": cloudfront.PriceClass.PRICE_CLASS_ALL,
}

# Options a sites file may set in each section
BUCKET_OPTIONS = frozenset(
  {
    "versioned",
    "removal_policy",
    "website_error_document",
    "enforce_ssl",
    "public_read_access",
    "auto_delete_objects",
  }
)
CLOUDFRONT_OPTIONS = frozenset(
  {"comment", "default_root_object", "price_class", "enable_ipv6", "enabled"}
)
DEPLOYMENT_OPTIONS = frozenset(
  {
    "prune",
    "retain_on_delete",
    "memory_limit",
    "exclude",
    "include",
    "distribution_paths",
    "destination_key_prefix",
  }
)


class SiteConfigError(ValueError):
  """Raised when a sites file describes a site that cannot be built."""


@dataclass
class SiteConfig:
  """Configuration for a single static site."""

  bucket_name: str
  build_path: str
  site_entry: str = "index.html"
  owner: str | None = None
  region: str = "us-east-1"
  bucket: BucketOverrides | None = None
  cloudfront: DistributionOverrides | None = None
  deployment: DeploymentOverrides | None = None


@dataclass
class Config:
  """Multi-site configuration."""

  sites: list[SiteConfig] = field(default_factory=list)

  @classmethod
  def from_yaml(cls, path: Path | str = "sites.yaml") -> "Config":
    """Load configuration from YAML file.

    Relative build paths are resolved against the file's directory.
    """
    path = Path(path)
    with open(path) as f:
      data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
      raise SiteConfigError(f"{path}: expected a mapping at the top level")
    defaults = data.get("defaults") or {}
    if not isinstance(defaults, dict):
      raise SiteConfigError(f"{path}: 'defaults' must be a mapping")
    site_list = data.get("sites") or []
    if not isinstance(site_list, list):
      raise SiteConfigError(f"{path}: 'sites' must be a list")

    sites: list[SiteConfig] = []

    for index, site_data in enumerate(site_list):
      if not isinstance(site_data, dict):
        raise SiteConfigError(f"{path}: site #{index} must be a mapping")

      # Merge defaults with site-specific config
      merged = merge_right(defaults, site_data)

      for key in ("bucket_name", "build_path"):
        if not merged.get(key):
          raise SiteConfigError(f"{path}: site is missing required key '{key}'")

      build_path = Path(merged["build_path"])
      if not build_path.is_absolute():
        build_path = path.parent / build_path

      site = SiteConfig(
        bucket_name=merged["bucket_name"],
        build_path=str(build_path),
        site_entry=merged.get("site_entry", "index.html"),
        owner=merged.get("owner"),
        region=merged.get("region", "us-east-1"),
        bucket=_bucket_overrides(merged.get("bucket")),
        cloudfront=_distribution_overrides(merged.get("cloudfront")),
        deployment=_section(
          DeploymentOverrides, "deployment", DEPLOYMENT_OPTIONS, merged.get("deployment")
        ),
      )
      logger.debug("Loaded site %s from %s", site.bucket_name, path)
      sites.append(site)

    return cls(sites=sites)


def _check_section(section: str, allowed: frozenset[str], data: Any) -> dict[str, Any]:
  if not isinstance(data, dict):
    raise SiteConfigError(f"'{section}' must be a mapping")
  unsupported = sorted(set(data) - allowed)
  if unsupported:
    raise SiteConfigError(
      f"unsupported option(s) in '{section}': {', '.join(unsupported)};"
      f" expected one of {sorted(allowed)}"
    )
  return dict(data)


def _section(record: type, section: str, allowed: frozenset[str], data: Any) -> Any:
  if not data:
    return None
  return record(**_check_section(section, allowed, data))


def _bucket_overrides(data: Any) -> BucketOverrides | None:
  if not data:
    return None
  data = _check_section("bucket", BUCKET_OPTIONS, data)
  if "removal_policy" in data:
    # Convert removal_policy string to enum
    removal_policy_str = str(data.pop("removal_policy"))
    data["removal_policy"] = REMOVAL_POLICIES.get(
      removal_policy_str.lower(), RemovalPolicy.RETAIN
    )
  return BucketOverrides(**data)


def _distribution_overrides(data: Any) -> DistributionOverrides | None:
  if not data:
    return None
  data = _check_section("cloudfront", CLOUDFRONT_OPTIONS, data)
  if "price_class" in data:
    price_class_str = str(data.pop("price_class")).lower()
    if price_class_str not in PRICE_CLASSES:
      raise SiteConfigError(
        f"unknown price_class '{price_class_str}', expected one of {sorted(PRICE_CLASSES)}"
      )
    data["price_class"] = PRICE_CLASSES[price_class_str]
  return DistributionOverrides(**data)
