"""GitHub repository lookups for profile pages.

Returns the five oldest-created public repositories of a GitHub user.
Successful responses are cached; any failure yields None.
"""

import logging
from urllib.parse import quote

import httpx

from ..config import settings
from .cache import CacheService

logger = logging.getLogger(__name__)

GITHUB_API = "https://api.github.com"
USER_AGENT = "devconnector"
TIMEOUT = 10.0


def _headers() -> dict[str, str]:
    headers = {"User-Agent": USER_AGENT, "Accept": "application/vnd.github+json"}
    if settings.github_token:
        headers["Authorization"] = f"token {settings.github_token}"
    return headers


def fetch_github_repos(username: str, cache: CacheService) -> list | None:
    """Fetch a user's repositories, or None if the user can't be resolved."""
    username = username.strip()
    if not username:
        return None

    cache_key = f"github:repos:{username.lower()}"
    cached = cache.get_json(cache_key)
    if cached is not None:
        return cached

    try:
        response = httpx.get(
            f"{GITHUB_API}/users/{quote(username, safe='')}/repos",
            params={"per_page": 5, "sort": "created:asc"},
            headers=_headers(),
            timeout=TIMEOUT,
        )
        response.raise_for_status()
        repos = response.json()
    except (httpx.HTTPError, ValueError) as exc:
        logger.warning("GitHub lookup failed for %s: %s", username, exc)
        return None

    if not isinstance(repos, list):
        return None
    cache.set_json(cache_key, repos, settings.github_cache_ttl)
    return repos
