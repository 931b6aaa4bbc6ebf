"""Pytest configuration and fixtures"""

import argparse
import os

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Use a temp home directory and clear REGIONPEDIA_* env vars"""
    monkeypatch.setenv("HOME", str(tmp_path))
    config_path = tmp_path / ".regionpedia" / "config.toml"
    for key in list(os.environ):
        if key.startswith("REGIONPEDIA_"):
            monkeypatch.delenv(key)
    return config_path


@pytest.fixture
def write_config(isolated_config):
    """Write TOML content to the isolated config file"""
    def _write(content: str):
        isolated_config.parent.mkdir(parents=True, exist_ok=True)
        isolated_config.write_text(content)
        return isolated_config
    return _write


@pytest.fixture
def expand_args():
    """Build args for the expand command as the parser would"""
    def _make(*regions, **overrides):
        values = {
            "command": "expand",
            "regions": list(regions),
            "strict": None,
            "default_region": None,
            "format": "json",
            "output": None,
            "quiet": True,
            "debug": False,
            "profile": None,
        }
        values.update(overrides)
        return argparse.Namespace(**values)
    return _make


@pytest.fixture
def sample_regions():
    """Create sample region data"""
    return [
        {"code": "us-east-1", "name": "US East (N. Virginia)"},
        {"code": "us-west-2", "name": "US West (Oregon)"},
        {"code": "eu-west-1", "name": "EU (Ireland)"},
    ]


@pytest.fixture
def sample_expansions():
    """Create sample expansion results"""
    return [
        {"input": "ue1", "region": "us-east-1", "name": "US East (N. Virginia)", "known": True},
        {"input": "as9", "region": "ap-south-9", "name": "ap-south-9", "known": False},
    ]
