"""Tests for the configuration loader."""

from pathlib import Path

import pytest
from aws_cdk import RemovalPolicy

from infrastructure.config import Config, SiteConfig


def write_config(tmp_path: Path, content: str) -> Path:
  path = tmp_path / "sites.yaml"
  path.write_text(content)
  return path


class TestSiteConfig:
  """Test SiteConfig dataclass."""

  def test_default_values(self) -> None:
    """Verify default values are set correctly."""
    config = SiteConfig(
      domain="example.com",
      bucket_name="example-bucket",
      asset_path=Path("dist"),
    )

    assert config.hosted_zone_id is None
    assert config.include_www is True
    assert config.include_ipv6 is False
    assert config.index_document == "index.html"
    assert config.error_document == "error/index.html"
    assert config.error_ttl_minutes == 30
    assert config.invalidation_paths == ["/*"]
    assert config.removal_policy == RemovalPolicy.DESTROY
    assert config.region == "us-east-1"
    assert config.account is None

  def test_stack_name(self) -> None:
    config = SiteConfig(
      domain="code-adjacent.com", bucket_name="b", asset_path=Path("dist")
    )
    assert config.stack_name == "StaticSite-code-adjacent-com"


class TestConfigFromYaml:
  """Test Config.from_yaml loading."""

  def test_load_simple_config(self, tmp_path: Path) -> None:
    """Test loading a simple configuration."""
    path = write_config(
      tmp_path,
      """
sites:
  - domain: code-adjacent.com
    bucket_name: code-adjacent-dumbelf
    asset_path: frontend-react/dist
""",
    )

    config = Config.from_yaml(path)

    assert len(config.sites) == 1
    site = config.sites[0]
    assert site.domain == "code-adjacent.com"
    assert site.bucket_name == "code-adjacent-dumbelf"
    assert site.asset_path == tmp_path / "frontend-react" / "dist"

  def test_bucket_name_defaults_to_domain(self, tmp_path: Path) -> None:
    path = write_config(
      tmp_path,
      """
sites:
  - domain: example.com
    asset_path: dist
""",
    )

    assert Config.from_yaml(path).sites[0].bucket_name == "example.com"

  def test_absolute_asset_path_is_kept(self, tmp_path: Path) -> None:
    path = write_config(
      tmp_path,
      """
sites:
  - domain: example.com
    asset_path: /srv/site
""",
    )

    assert Config.from_yaml(path).sites[0].asset_path == Path("/srv/site")

  def test_load_with_defaults(self, tmp_path: Path) -> None:
    """Test loading configuration with defaults."""
    path = write_config(
      tmp_path,
      """
defaults:
  region: eu-west-1
  include_www: false
  include_ipv6: true
  asset_path: dist

sites:
  - domain: example.com
""",
    )

    site = Config.from_yaml(path).sites[0]
    assert site.region == "eu-west-1"
    assert site.include_www is False
    assert site.include_ipv6 is True
    assert site.asset_path == tmp_path / "dist"

  def test_site_overrides_defaults(self, tmp_path: Path) -> None:
    """Test that site-specific config overrides defaults."""
    path = write_config(
      tmp_path,
      """
defaults:
  include_www: false
  asset_path: dist

sites:
  - domain: example.com
    include_www: true
""",
    )

    assert Config.from_yaml(path).sites[0].include_www is True

  def test_load_multiple_sites(self, tmp_path: Path) -> None:
    """Test loading multiple sites."""
    path = write_config(
      tmp_path,
      """
defaults:
  asset_path: dist

sites:
  - domain: site1.com
  - domain: site2.com
""",
    )

    config = Config.from_yaml(path)
    assert [s.domain for s in config.sites] == ["site1.com", "site2.com"]

  @pytest.mark.parametrize(
    ("value", "expected"),
    [
      ("retain", RemovalPolicy.RETAIN),
      ("Destroy", RemovalPolicy.DESTROY),
      ("snapshot", RemovalPolicy.SNAPSHOT),
      ("bogus", RemovalPolicy.DESTROY),
    ],
  )
  def test_removal_policy_conversion(
    self, tmp_path: Path, value: str, expected: RemovalPolicy
  ) -> None:
    """Test removal policy string conversion."""
    path = write_config(
      tmp_path,
      f"""
sites:
  - domain: example.com
    asset_path: dist
    removal_policy: {value}
""",
    )

    assert Config.from_yaml(path).sites[0].removal_policy == expected

  def test_optional_site_settings(self, tmp_path: Path) -> None:
    path = write_config(
      tmp_path,
      """
sites:
  - domain: example.com
    asset_path: dist
    hosted_zone_id: Z1234567890
    account: 123456789012
    error_ttl_minutes: 5
    invalidation_paths:
      - /index.html
      - /assets/*
    owner: Site Owner
""",
    )

    site = Config.from_yaml(path).sites[0]
    assert site.hosted_zone_id == "Z1234567890"
    assert site.account == "123456789012"
    assert site.error_ttl_minutes == 5
    assert site.invalidation_paths == ["/index.html", "/assets/*"]
    assert site.owner == "Site Owner"
    assert site.email is None

  def test_missing_asset_path_raises(self, tmp_path: Path) -> None:
    path = write_config(
      tmp_path,
      """
sites:
  - domain: example.com
""",
    )

    with pytest.raises(KeyError, match="asset_path"):
      Config.from_yaml(path)

  def test_empty_file(self, tmp_path: Path) -> None:
    path = write_config(tmp_path, "")

    assert Config.from_yaml(path).sites == []
