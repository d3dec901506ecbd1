"""
GitHub data fetching module.

This module handles the GitHub API interaction for fetching repository
metadata using PyGithub.
"""

import logging

import requests

from .models import DEFAULT_API_BASE, FetchResult

# External libs
try:
    from github import Github, GithubException
except Exception as e:
    raise RuntimeError("PyGithub is required. Install with: pip install PyGithub") from e

# Set up logging
logger = logging.getLogger("package-generator.fetcher")


class GitHubFetcher:
    """
    Fetch public repository metadata from the GitHub REST API.

    Requests are unauthenticated and never retried.

    Args:
        api_base: Base URL of the API, e.g. ``https://api.github.com`` or a
                  local mock server.
    """

    def __init__(self, api_base: str = DEFAULT_API_BASE) -> None:
        self.api_base = api_base.rstrip("/")
        self._g = Github(base_url=self.api_base, retry=None)
        logger.debug("GitHub client initialized (base_url=%s)", self.api_base)

    def fetch(self, owner: str, repo_name: str) -> FetchResult:
        """
        Fetch the raw metadata of ``{api_base}/repos/{owner}/{repo_name}``.

        Args:
            owner: Repository owner username
            repo_name: Repository name

        Returns:
            FetchResult holding the parsed JSON body on success, or the error
            detail when the request failed or the response was not 2xx
        """
        try:
            # requester returns the decoded body as sent; Repository.raw_data adds keys
            _, metadata = self._g.requester.requestJsonAndCheck("GET", f"/repos/{owner}/{repo_name}")
        except GithubException as e:
            message = _describe_github_error(e)
            logger.debug("Failed to fetch repository metadata for %s/%s: %s", owner, repo_name, message)
            return FetchResult.failure(message)
        except requests.RequestException as e:
            logger.debug("Request for %s/%s failed: %s", owner, repo_name, e)
            return FetchResult.failure(str(e))

        logger.info("Fetched metadata for %s/%s", owner, repo_name)
        return FetchResult.success(metadata)


def _describe_github_error(e: GithubException) -> str:
    # data is the decoded error body, usually {"message": ..., "documentation_url": ...}
    data = e.data if isinstance(e.data, dict) else {}
    detail = data.get("message")
    if detail:
        return f"Request failed with status code {e.status}: {detail}"
    return f"Request failed with status code {e.status}"
