"""Subprocess and filesystem implementations of the pipeline capabilities."""

from create_plugin.adapters.filesystem import TreeCopier
from create_plugin.adapters.git import GitRepository
from create_plugin.adapters.npm import NpmClient

__all__ = ["GitRepository", "NpmClient", "TreeCopier"]
