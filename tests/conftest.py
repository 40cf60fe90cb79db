"""Pytest fixtures for CDK construct tests."""

from pathlib import Path

import pytest

ACCOUNT = "123456789012"


@pytest.fixture
def site_assets(tmp_path: Path) -> Path:
  """Create a built site directory to deploy."""
  dist = tmp_path / "dist"
  (dist / "error").mkdir(parents=True)
  (dist / "index.html").write_text("<h1>Home</h1>")
  (dist / "error" / "index.html").write_text("<h1>Not found</h1>")
  return dist
