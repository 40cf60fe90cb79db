#!/usr/bin/env python3
"""CDK application entry point for static website infrastructure."""

import os
import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk
import boto3

from infrastructure.config import Config, SiteConfig
from infrastructure.stacks.site_stack import StaticSiteStack


def get_account_id() -> str:
  """Get AWS account ID from current credentials."""
  sts = boto3.client("sts")
  return str(sts.get_caller_identity()["Account"])


def resolve_account(site: SiteConfig) -> str:
  """Pick the account for a site stack.

  Hosted zone lookups need a concrete account, so fall back to the CLI's
  default account and finally to the caller identity.
  """
  return site.account or os.environ.get("CDK_DEFAULT_ACCOUNT") or get_account_id()


def main() -> None:
  """Create CDK app with a stack for each configured site."""
  app = cdk.App()

  config_path = app.node.try_get_context("config") or "sites.yaml"
  config = Config.from_yaml(Path(config_path))

  for site in config.sites:
    StaticSiteStack(
      app,
      site.stack_name,
      site_config=site,
      env=cdk.Environment(
        account=resolve_account(site),
        region=site.region,
      ),
      description=f"Static website infrastructure for {site.domain}",
    )

  app.synth()


if __name__ == "__main__":
  main()
