"""Template provenance checks."""

from __future__ import annotations

from create_plugin.core.config import DEFAULT_POLICY, ManifestPolicy
from create_plugin.core.errors import ManifestNotFound, UntrustedTemplate
from create_plugin.core.manifest import extract_keywords, read_manifest
from create_plugin.core.types import PackageRegistry, TemplateReference


def local_keywords(reference: TemplateReference, policy: ManifestPolicy) -> list[str] | None:
    """Read the keyword list from a local template's manifest."""
    manifest_path = reference.resolved_path / policy.manifest_name
    if not manifest_path.is_file():
        raise ManifestNotFound(
            reference.raw, f"No {policy.manifest_name} found at {reference.resolved_path}."
        )
    try:
        manifest = read_manifest(manifest_path)
    except (OSError, ValueError) as exc:
        raise ManifestNotFound(reference.raw, f"Cannot read {manifest_path}: {exc}") from exc
    return extract_keywords(manifest)


def verify_template(
    reference: TemplateReference,
    registry: PackageRegistry,
    policy: ManifestPolicy = DEFAULT_POLICY,
) -> list[str]:
    """
    Check that the template declares the marker keyword.

    Local templates are checked by reading their manifest, registry templates
    by querying ``registry``. Registry errors propagate unchanged.

    Returns:
        The template's keyword list.

    Raises:
        ManifestNotFound: The local template or its manifest is missing.
        UntrustedTemplate: The keywords do not contain the marker.
    """
    if reference.is_local:
        keywords = local_keywords(reference, policy)
    else:
        keywords = registry.keywords(reference.raw)

    if not keywords or policy.marker_keyword not in keywords:
        raise UntrustedTemplate(
            reference.raw,
            f'The template is not a CSP template (missing "{policy.marker_keyword}" '
            f"keyword in {policy.manifest_name}), check the template name to make sure "
            "you are using the current template name.",
        )
    return list(keywords)
