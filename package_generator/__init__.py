"""
Package Generator - Create a package.json from a GitHub repository's metadata.
"""

from .models import FetchResult, Manifest, UserInput
from .fetcher import GitHubFetcher
from .generator import ManifestGenerator
from .prompter import InputProvider, InteractivePrompter, StaticInputProvider
from .writer import ensure_dir, write_manifest
from .main import main, run

__all__ = [
    'FetchResult',
    'Manifest',
    'UserInput',
    'GitHubFetcher',
    'ManifestGenerator',
    'InputProvider',
    'InteractivePrompter',
    'StaticInputProvider',
    'ensure_dir',
    'write_manifest',
    'main',
    'run',
]
