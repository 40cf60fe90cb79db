"""S3 bucket for static website hosting."""

from aws_cdk import Annotations, RemovalPolicy
from aws_cdk import aws_s3 as s3
from constructs import Construct


class StorageBucket(Construct):
  """S3 bucket configured for static website hosting.

  Everything stored in the bucket is publicly readable.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket_name: str,
    index_document: str = "index.html",
    error_document: str = "error/index.html",
    removal_policy: RemovalPolicy = RemovalPolicy.DESTROY,
  ) -> None:
    super().__init__(scope, id)

    self.bucket = s3.Bucket(
      self,
      "Bucket",
      bucket_name=bucket_name,
      website_index_document=index_document,
      website_error_document=error_document,
      public_read_access=True,
      # Block ACLs only, the public read policy must stay allowed
      block_public_access=s3.BlockPublicAccess(
        block_public_acls=True,
        ignore_public_acls=True,
        block_public_policy=False,
        restrict_public_buckets=False,
      ),
      access_control=s3.BucketAccessControl.BUCKET_OWNER_FULL_CONTROL,
      removal_policy=removal_policy,
      auto_delete_objects=removal_policy == RemovalPolicy.DESTROY,
    )

    Annotations.of(self).add_info(
      f"All content stored in bucket {bucket_name} is publicly readable"
    )
