"""Main composite construct for complete static website infrastructure."""

from pathlib import Path

from aws_cdk import RemovalPolicy
from constructs import Construct

from .certificate import SiteCertificate
from .content import SiteContent
from .distribution import CloudFrontDistribution
from .dns import DnsRecords
from .storage import StorageBucket


class StaticSiteConstruct(Construct):
  """Complete static website infrastructure.

  Creates, in dependency order:
  - Lookup (or import) of the existing Route 53 hosted zone
  - ACM certificate for the apex and wildcard domain (DNS validated)
  - Public S3 bucket with website hosting
  - CloudFront distribution with HTTPS in front of the bucket
  - Alias records for the apex and www domain
  - Deployment of the local site content with cache invalidation
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    bucket_name: str,
    asset_path: Path | str,
    hosted_zone_id: str | None = None,
    include_www: bool = True,
    include_ipv6: bool = False,
    index_document: str = "index.html",
    error_document: str = "error/index.html",
    error_ttl_minutes: int = 30,
    invalidation_paths: list[str] | None = None,
    removal_policy: RemovalPolicy = RemovalPolicy.DESTROY,
  ) -> None:
    super().__init__(scope, id)

    self.dns = DnsRecords(
      self,
      "Dns",
      domain_name=domain_name,
      existing_hosted_zone_id=hosted_zone_id,
    )

    self.certificate = SiteCertificate(
      self,
      "SiteCertificate",
      domain_name=domain_name,
      hosted_zone=self.dns.hosted_zone,
      removal_policy=removal_policy,
    )

    self.bucket = StorageBucket(
      self,
      "SiteBucket",
      bucket_name=bucket_name,
      index_document=index_document,
      error_document=error_document,
      removal_policy=removal_policy,
    )

    self.distribution = CloudFrontDistribution(
      self,
      "SiteDistribution",
      bucket=self.bucket.bucket,
      certificate=self.certificate.certificate,
      domain_name=domain_name,
      include_www=include_www,
      index_document=index_document,
      error_document=error_document,
      error_ttl_minutes=error_ttl_minutes,
    )

    self.dns.create_cloudfront_records(
      distribution=self.distribution.distribution,
      include_www=include_www,
      include_ipv6=include_ipv6,
    )

    self.content = SiteContent(
      self,
      "SiteContent",
      bucket=self.bucket.bucket,
      distribution=self.distribution.distribution,
      asset_path=asset_path,
      invalidation_paths=invalidation_paths,
    )
