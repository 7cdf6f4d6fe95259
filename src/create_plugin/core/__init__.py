"""Template verification and project materialization."""

from create_plugin.core.classify import classify_template, is_local_template
from create_plugin.core.config import DEFAULT_POLICY, ManifestPolicy, Options
from create_plugin.core.errors import (
    FetchFailed,
    InstallFailed,
    ManifestNotFound,
    RegistryLookupFailed,
    RegistryUnavailable,
    RepositoryInitFailed,
    ScaffoldError,
    UnsafeTarget,
    UntrustedTemplate,
)
from create_plugin.core.fetch import fetch_template
from create_plugin.core.manifest import clean_manifest, clean_scripts
from create_plugin.core.materialize import materialize, prepare_target
from create_plugin.core.pipeline import create_project
from create_plugin.core.types import TemplateReference
from create_plugin.core.verify import verify_template

__all__ = [
    "DEFAULT_POLICY",
    "FetchFailed",
    "InstallFailed",
    "ManifestNotFound",
    "ManifestPolicy",
    "Options",
    "RegistryLookupFailed",
    "RegistryUnavailable",
    "RepositoryInitFailed",
    "ScaffoldError",
    "TemplateReference",
    "UnsafeTarget",
    "UntrustedTemplate",
    "classify_template",
    "clean_manifest",
    "clean_scripts",
    "create_project",
    "fetch_template",
    "is_local_template",
    "materialize",
    "prepare_target",
    "verify_template",
]
