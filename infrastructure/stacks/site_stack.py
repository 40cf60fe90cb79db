"""CDK stack for a single static website."""

from typing import Any

import aws_cdk as cdk
from constructs import Construct

from infrastructure.cdk_constructs import StaticSiteConstruct
from infrastructure.config import SiteConfig


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

    self.site = StaticSiteConstruct(
      self,
      "Site",
      domain_name=site_config.domain,
      bucket_name=site_config.bucket_name,
      asset_path=site_config.asset_path,
      hosted_zone_id=site_config.hosted_zone_id,
      include_www=site_config.include_www,
      include_ipv6=site_config.include_ipv6,
      index_document=site_config.index_document,
      error_document=site_config.error_document,
      error_ttl_minutes=site_config.error_ttl_minutes,
      invalidation_paths=site_config.invalidation_paths,
      removal_policy=site_config.removal_policy,
    )

    # Outputs
    cdk.CfnOutput(
      self,
      "Certificate",
      value=self.site.certificate.certificate.certificate_arn,
      description="ACM certificate ARN",
    )
    cdk.CfnOutput(
      self,
      "Bucket",
      value=self.site.bucket.bucket.bucket_name,
      description="S3 bucket name",
    )
    cdk.CfnOutput(
      self,
      "DistributionId",
      value=self.site.distribution.distribution.distribution_id,
      description="CloudFront distribution ID",
    )

    # Tag resources with owner info
    cdk.Tags.of(self).add("Project", "static-sites")
    cdk.Tags.of(self).add("Domain", site_config.domain)
    if site_config.owner:
      cdk.Tags.of(self).add("Owner", site_config.owner)
    if site_config.email:
      cdk.Tags.of(self).add("OwnerEmail", site_config.email)
