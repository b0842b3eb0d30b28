#!/usr/bin/env python3
"""CDK application entry point for static website infrastructure."""

import logging
import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk
import boto3

from s3_web_ui.config import Config
from s3_web_ui.stacks.site_stack import StaticSiteStack

logger = logging.getLogger(__name__)


def get_account_id() -> str:
  """Get AWS account ID from current credentials."""
  sts = boto3.client("sts")
  return str(sts.get_caller_identity()["Account"])


def stack_name_for(bucket_name: str) -> str:
  """CloudFormation-safe stack name for a site bucket."""
  return f"StaticSite-{bucket_name.replace('.', '-').replace('_', '-')}"


def add_site_stacks(app: cdk.App) -> list[StaticSiteStack]:
  """Add a stack for each site in the configured sites file."""
  # Load configuration
  config_path = app.node.try_get_context("config") or "sites.yaml"
  config = Config.from_yaml(Path(config_path))

  account_id = app.node.try_get_context("account") or get_account_id()

  # Create a stack for each site
  stacks = []
  for site in config.sites:
    stack_name = stack_name_for(site.bucket_name)
    stack = StaticSiteStack(
      app,
      stack_name,
      site_config=site,
      env=cdk.Environment(
        account=account_id,
        region=site.region,
      ),
      description=f"Static website infrastructure for {site.bucket_name}",
    )
    stacks.append(stack)
    logger.info("Added stack %s (%s)", stack_name, site.region)

  return stacks


def main() -> None:
  """Create CDK app with stacks for each configured site."""
  logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
  app = cdk.App()
  add_site_stacks(app)
  app.synth()


if __name__ == "__main__":
  main()
