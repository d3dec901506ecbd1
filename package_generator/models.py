"""
Data models for the package generator.

This module contains the shared data structures used across all modules.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Raw repository JSON as returned by the GitHub REST API
RepositoryMetadata = Dict[str, Any]

DEFAULT_API_BASE = "https://api.github.com"
DEFAULT_OUTPUT_DIR = "./output"
MANIFEST_FILENAME = "package.json"

DEFAULT_VERSION = "1.0.0"
DEFAULT_MAIN = "index.js"
DEFAULT_LICENSE = "MIT"
PLACEHOLDER_TEST_SCRIPT = 'echo "Error: no test specified" && exit 1'


@dataclass(frozen=True)
class UserInput:
    """Values collected from the user before anything is fetched."""
    owner: str
    repo: str
    output_dir: str = DEFAULT_OUTPUT_DIR


@dataclass(frozen=True)
class FetchResult:
    """
    Outcome of a metadata fetch.

    Exactly one of ``metadata`` and ``error`` is set. The caller decides what
    a failure means for the process.
    """
    metadata: Optional[RepositoryMetadata] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, metadata: RepositoryMetadata) -> "FetchResult":
        return cls(metadata=metadata)

    @classmethod
    def failure(cls, error: str) -> "FetchResult":
        return cls(error=error)


@dataclass(frozen=True)
class Manifest:
    """A package.json descriptor derived from repository metadata."""
    name: str
    version: str
    description: str
    main: str
    scripts: Dict[str, str]
    repository: Dict[str, Optional[str]]
    keywords: List[str] = field(default_factory=list)
    author: Optional[str] = None
    license: str = DEFAULT_LICENSE
    bugs: Dict[str, Optional[str]] = field(default_factory=dict)
    homepage: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the manifest as a plain dict in package.json key order."""
        return {
            "name": self.name,
            "version": self.version,
            "description": self.description,
            "main": self.main,
            "scripts": dict(self.scripts),
            "repository": dict(self.repository),
            "keywords": list(self.keywords),
            "author": self.author,
            "license": self.license,
            "bugs": dict(self.bugs),
            "homepage": self.homepage,
        }
