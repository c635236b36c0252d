"""Tests for command-line parsing of the launcher."""

from pathlib import Path

from opensrfiview.app import parse_args


def test_defaults():
    args = parse_args([])
    assert args.search is False
    assert args.config is None
    assert args.log_level == "WARNING"


def test_search_and_config():
    args = parse_args(["--search", "--config", "/tmp/x.json", "--log-level", "DEBUG"])
    assert args.search is True
    assert args.config == Path("/tmp/x.json")
    assert args.log_level == "DEBUG"
