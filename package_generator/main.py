#!/usr/bin/env python3
"""
Main driver script for the package generator.

This script provides the command-line interface and coordinates all modules
to generate a package.json file from a GitHub repository's metadata.

Usage (example):
    python -m package_generator.main
    python -m package_generator.main --api-base http://localhost:8080
"""

import argparse
import logging
import sys
from typing import List, Optional

from .fetcher import GitHubFetcher
from .generator import ManifestGenerator
from .models import DEFAULT_API_BASE, UserInput
from .prompter import InputProvider, InteractivePrompter
from .writer import ensure_dir, write_manifest

logger = logging.getLogger("package-generator")


def run(user_input: UserInput, fetcher: GitHubFetcher, generator: Optional[ManifestGenerator] = None) -> int:
    """
    Fetch, build and write the manifest for one repository.

    Nothing is created on disk unless the fetch succeeded. Filesystem errors
    propagate to the caller.

    Args:
        user_input: Owner, repository name and output directory
        fetcher: Fetcher used for the single metadata request
        generator: Manifest generator (default settings if omitted)

    Returns:
        Process exit status: 0 on success, 1 if the fetch failed
    """
    generator = generator or ManifestGenerator()

    logger.info("Fetching repository metadata for %s/%s...", user_input.owner, user_input.repo)
    result = fetcher.fetch(user_input.owner, user_input.repo)
    if not result.ok:
        print(f"Error fetching repository information: {result.error}", file=sys.stderr)
        return 1

    manifest = generator.build(result.metadata)

    ensure_dir(user_input.output_dir)
    write_manifest(user_input.output_dir, manifest, generator)

    print(f"\nRepository metadata for {user_input.owner}/{user_input.repo} has been processed successfully.")
    return 0


def main(argv: Optional[List[str]] = None, input_provider: Optional[InputProvider] = None) -> None:
    """
    Main entry point for the package generator.

    All repository parameters are gathered interactively; the optional flags
    only select the API host and log verbosity.
    """
    parser = argparse.ArgumentParser(description="Generate a package.json from GitHub repository metadata.")
    parser.add_argument("--api-base", default=DEFAULT_API_BASE, help="GitHub API base URL")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        user_input = (input_provider or InteractivePrompter()).collect()
        fetcher = GitHubFetcher(api_base=args.api_base)
        status = run(user_input, fetcher)
    except KeyboardInterrupt:
        logger.info("Package generation interrupted by user")
        print("\nOperation cancelled by user")
        sys.exit(1)
    except Exception as e:
        logger.error("Package generation failed: %s", e)
        print(f"Error: package generation failed - {e}", file=sys.stderr)
        sys.exit(1)

    sys.exit(status)


if __name__ == "__main__":
    main()
