"""CloudFront distribution for static website."""

from aws_cdk import Duration
from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_s3 as s3
from constructs import Construct


class CloudFrontDistribution(Construct):
  """CloudFront distribution with S3 static website origin."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    certificate: acm.ICertificate,
    domain_name: str,
    include_www: bool = True,
    index_document: str = "index.html",
    error_document: str = "error/index.html",
    error_ttl_minutes: int = 30,
  ) -> None:
    super().__init__(scope, id)

    domain_names = [domain_name]
    if include_www:
      domain_names.insert(0, f"www.{domain_name}")

    self.distribution = cloudfront.Distribution(
      self,
      "Distribution",
      default_behavior=cloudfront.BehaviorOptions(
        origin=origins.S3StaticWebsiteOrigin(bucket),
        compress=True,
        allowed_methods=cloudfront.AllowedMethods.ALLOW_GET_HEAD_OPTIONS,
        viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
      ),
      domain_names=domain_names,
      certificate=certificate,
      default_root_object=index_document,
      minimum_protocol_version=cloudfront.SecurityPolicyProtocol.TLS_V1_2_2021,
      error_responses=[
        cloudfront.ErrorResponse(
          http_status=404,
          response_http_status=404,
          response_page_path=f"/{error_document.lstrip('/')}",
          ttl=Duration.minutes(error_ttl_minutes),
        )
      ],
    )
