"""Route 53 DNS constructs."""

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_route53 as route53
from aws_cdk import aws_route53_targets as targets
from constructs import Construct


class DnsRecords(Construct):
  """Existing Route 53 hosted zone and the alias records pointing into it."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    existing_hosted_zone_id: str | None = None,
  ) -> None:
    super().__init__(scope, id)

    self.domain_name = domain_name
    self.records: list[route53.RecordSet] = []

    # The zone is never created here, only looked up or imported
    if existing_hosted_zone_id:
      self.hosted_zone = route53.HostedZone.from_hosted_zone_attributes(
        self,
        "HostedZone",
        hosted_zone_id=existing_hosted_zone_id,
        zone_name=domain_name,
      )
    else:
      self.hosted_zone = route53.HostedZone.from_lookup(
        self,
        "HostedZone",
        domain_name=domain_name,
      )

  def create_cloudfront_records(
    self,
    distribution: cloudfront.IDistribution,
    include_www: bool = True,
    include_ipv6: bool = False,
  ) -> None:
    """Create alias records pointing to CloudFront distribution."""
    target = route53.RecordTarget.from_alias(targets.CloudFrontTarget(distribution))

    record_names = {"Site": self.domain_name}
    if include_www:
      record_names["WwwSite"] = f"www.{self.domain_name}"

    for prefix, record_name in record_names.items():
      self.records.append(
        route53.ARecord(
          self,
          f"{prefix}AliasRecord",
          zone=self.hosted_zone,
          record_name=record_name,
          target=target,
        )
      )
      if include_ipv6:
        self.records.append(
          route53.AaaaRecord(
            self,
            f"{prefix}AaaaAliasRecord",
            zone=self.hosted_zone,
            record_name=record_name,
            target=target,
          )
        )
