"""Pytest fixtures for CDK construct tests."""

from pathlib import Path

import aws_cdk as cdk
import pytest


@pytest.fixture
def app() -> cdk.App:
  """Create a CDK App for testing."""
  return cdk.App()


@pytest.fixture
def stack(app: cdk.App) -> cdk.Stack:
  """Create a CDK Stack for testing."""
  return cdk.Stack(app, "TestStack", env=cdk.Environment(region="us-east-1"))


@pytest.fixture
def build_dir(tmp_path: Path) -> Path:
  """A minimal site build directory."""
  build = tmp_path / "build"
  build.mkdir()
  (build / "index.html").write_text("<html><body>hello</body></html>")
  (build / "error.html").write_text("<html><body>not found</body></html>")
  return build
