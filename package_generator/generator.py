"""
Manifest Generation Module

This module contains the ManifestGenerator class responsible for mapping
repository metadata onto a package.json manifest and rendering it as JSON.
"""

import json
from typing import Any, Dict, Optional

from .models import (
    DEFAULT_LICENSE,
    DEFAULT_MAIN,
    DEFAULT_VERSION,
    PLACEHOLDER_TEST_SCRIPT,
    Manifest,
    RepositoryMetadata,
)


class ManifestGenerator:
    """
    Compose a package.json manifest from repository metadata.

    Fields missing from the metadata (absent, null or empty) fall back to
    fixed defaults; only ``name`` is mandatory.
    """

    def __init__(self, indent: int = 2) -> None:
        """
        Initialize the manifest generator.

        Args:
            indent: Number of spaces used when rendering the JSON text
        """
        self.indent = indent

    def build(self, metadata: RepositoryMetadata) -> Manifest:
        """
        Build a Manifest from the raw repository JSON.

        Args:
            metadata: Repository JSON as returned by the GitHub API

        Returns:
            The derived Manifest

        Raises:
            ValueError: If the metadata is not an object or carries no repository name
        """
        if not isinstance(metadata, dict):
            raise ValueError("Repository metadata is not a JSON object")

        name = metadata.get("name")
        if not name:
            raise ValueError("Repository metadata has no 'name' field")

        html_url = metadata.get("html_url")

        return Manifest(
            name=name,
            version=DEFAULT_VERSION,
            description=metadata.get("description") or "",
            main=DEFAULT_MAIN,
            scripts={"test": PLACEHOLDER_TEST_SCRIPT},
            repository={"type": "git", "url": html_url},
            keywords=list(metadata.get("topics") or []),
            author=_nested(metadata, "owner", "login"),
            license=_nested(metadata, "license", "spdx_id") or DEFAULT_LICENSE,
            bugs={"url": f"{html_url}/issues" if html_url else None},
            homepage=metadata.get("homepage") or html_url,
        )

    def render(self, manifest: Manifest) -> str:
        """
        Serialize a manifest to indented JSON text.

        Args:
            manifest: Manifest to serialize

        Returns:
            JSON text with keys in package.json order and no trailing newline
        """
        return json.dumps(manifest.to_dict(), indent=self.indent, ensure_ascii=False)


def _nested(metadata: Dict[str, Any], key: str, subkey: str) -> Optional[Any]:
    section = metadata.get(key) or {}
    return section.get(subkey)
