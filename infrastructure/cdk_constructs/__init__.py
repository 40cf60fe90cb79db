"""CDK constructs for static website infrastructure."""

from .certificate import SiteCertificate
from .content import SiteContent
from .distribution import CloudFrontDistribution
from .dns import DnsRecords
from .static_site import StaticSiteConstruct
from .storage import StorageBucket

__all__ = [
  "CloudFrontDistribution",
  "DnsRecords",
  "SiteCertificate",
  "SiteContent",
  "StaticSiteConstruct",
  "StorageBucket",
]
