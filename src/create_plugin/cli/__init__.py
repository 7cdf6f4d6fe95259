"""Command line interface for create-plugin."""

from create_plugin.cli.app import app

__all__ = ["app"]
