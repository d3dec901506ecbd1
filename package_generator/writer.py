"""
Manifest output module.

Creates the output directory and writes the rendered package.json into it.
Filesystem errors are left to the caller.
"""

import logging
import os
from typing import Optional

from .generator import ManifestGenerator
from .models import MANIFEST_FILENAME, Manifest

logger = logging.getLogger("package-generator.writer")


def ensure_dir(path: str) -> None:
    """Create ``path`` and any missing parents; no-op if it already exists."""
    os.makedirs(path, exist_ok=True)
    logger.debug("Output directory ready: %s", path)


def write_manifest(output_dir: str, manifest: Manifest, generator: Optional[ManifestGenerator] = None) -> str:
    """
    Write ``<output_dir>/package.json``, replacing any existing file.

    Args:
        output_dir: Existing directory to write into
        manifest: Manifest to serialize
        generator: Generator used for rendering (default 2-space indent)

    Returns:
        Path of the written file
    """
    generator = generator or ManifestGenerator()
    file_path = os.path.join(output_dir, MANIFEST_FILENAME)

    logger.info("Writing manifest to %s", file_path)
    with open(file_path, "w", encoding="utf-8") as f:
        f.write(generator.render(manifest))

    print(f"package.json created successfully at: {file_path}")
    return file_path
