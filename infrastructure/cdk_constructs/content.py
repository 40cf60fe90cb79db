"""Site content deployment."""

from pathlib import Path

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_s3 as s3
from aws_cdk import aws_s3_deployment as s3_deploy
from constructs import Construct


class SiteContent(Construct):
  """Uploads a local asset directory to the bucket and invalidates the cache."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    distribution: cloudfront.IDistribution,
    asset_path: Path | str,
    invalidation_paths: list[str] | None = None,
  ) -> None:
    super().__init__(scope, id)

    self.deployment = s3_deploy.BucketDeployment(
      self,
      "Deployment",
      sources=[s3_deploy.Source.asset(str(asset_path))],
      destination_bucket=bucket,
      distribution=distribution,
      distribution_paths=invalidation_paths or ["/*"],
    )
