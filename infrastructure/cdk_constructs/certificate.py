"""ACM certificate with DNS validation."""

from aws_cdk import RemovalPolicy, Stack, Token
from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_route53 as route53
from constructs import Construct

# CloudFront only reads certificates from this region
CLOUDFRONT_CERTIFICATE_REGION = "us-east-1"


class SiteCertificate(Construct):
  """DNS-validated certificate for the apex and wildcard domain.

  CloudFront only reads certificates from a single region. Stacks deployed
  there get a regular ACM certificate; stacks elsewhere request it in that
  region through the cross-region custom resource.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    hosted_zone: route53.IHostedZone,
    removal_policy: RemovalPolicy = RemovalPolicy.DESTROY,
  ) -> None:
    super().__init__(scope, id)

    subject_alternative_names = [f"*.{domain_name}"]
    stack_region = Stack.of(self).region
    self.cross_region = (
      Token.is_unresolved(stack_region)
      or stack_region != CLOUDFRONT_CERTIFICATE_REGION
    )

    self.certificate: acm.ICertificate
    if self.cross_region:
      self.certificate = acm.DnsValidatedCertificate(
        self,
        "Certificate",
        domain_name=domain_name,
        subject_alternative_names=subject_alternative_names,
        hosted_zone=hosted_zone,
        region=CLOUDFRONT_CERTIFICATE_REGION,
      )
    else:
      self.certificate = acm.Certificate(
        self,
        "Certificate",
        domain_name=domain_name,
        subject_alternative_names=subject_alternative_names,
        validation=acm.CertificateValidation.from_dns(hosted_zone),
      )

    self.certificate.apply_removal_policy(removal_policy)
