"""Configuration loader for static site stacks."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml
from aws_cdk import RemovalPolicy

REMOVAL_POLICIES = {
  "retain": RemovalPolicy.RETAIN,
  "destroy": RemovalPolicy.DESTROY,
  "snapshot": RemovalPolicy.SNAPSHOT,
}


@dataclass
class SiteConfig:
  """Configuration for a single static site."""

  domain: str
  bucket_name: str
  asset_path: Path
  hosted_zone_id: str | None = None
  include_www: bool = True
  include_ipv6: bool = False
  index_document: str = "index.html"
  error_document: str = "error/index.html"
  error_ttl_minutes: int = 30
  invalidation_paths: list[str] = field(default_factory=lambda: ["/*"])
  removal_policy: RemovalPolicy = RemovalPolicy.DESTROY
  region: str = "us-east-1"
  account: str | None = None
  owner: str | None = None
  email: str | None = None

  @property
  def stack_name(self) -> str:
    return f"StaticSite-{self.domain.replace('.', '-')}"


@dataclass
class Config:
  """Multi-site configuration."""

  sites: list[SiteConfig] = field(default_factory=list)

  @classmethod
  def from_yaml(cls, path: Path | str = "sites.yaml") -> "Config":
    """Load configuration from YAML file.

    Keys under ``defaults`` apply to every site unless the site overrides them.
    Relative asset paths are resolved against the directory holding the file.
    """
    path = Path(path)
    with open(path) as f:
      data = yaml.safe_load(f) or {}

    defaults = data.get("defaults", {})
    sites: list[SiteConfig] = []

    for site_data in data.get("sites", []):
      merged = {**defaults, **site_data}

      removal_policy_str = str(merged.get("removal_policy", "destroy"))
      removal_policy = REMOVAL_POLICIES.get(
        removal_policy_str.lower(), RemovalPolicy.DESTROY
      )

      asset_path = Path(merged["asset_path"])
      if not asset_path.is_absolute():
        asset_path = path.parent / asset_path

      account = merged.get("account")

      sites.append(
        SiteConfig(
          domain=merged["domain"],
          bucket_name=merged.get("bucket_name") or merged["domain"],
          asset_path=asset_path,
          hosted_zone_id=merged.get("hosted_zone_id"),
          include_www=merged.get("include_www", True),
          include_ipv6=merged.get("include_ipv6", False),
          index_document=merged.get("index_document", "index.html"),
          error_document=merged.get("error_document", "error/index.html"),
          error_ttl_minutes=int(merged.get("error_ttl_minutes", 30)),
          invalidation_paths=list(merged.get("invalidation_paths", ["/*"])),
          removal_policy=removal_policy,
          region=merged.get("region", "us-east-1"),
          # YAML reads unquoted account ids as integers
          account=str(account) if account is not None else None,
          owner=merged.get("owner"),
          email=merged.get("email"),
        )
      )

    return cls(sites=sites)
