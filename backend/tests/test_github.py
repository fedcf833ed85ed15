"""Tests for GitHub repository lookups."""

from unittest.mock import MagicMock, patch

import httpx

from devconnector.integrations.cache import NullCacheService
from devconnector.integrations.github import fetch_github_repos


class _DictCache(NullCacheService):
    def __init__(self):
        self.data = {}

    def get_json(self, key):
        return self.data.get(key)

    def set_json(self, key, data, ttl):
        self.data[key] = data


def _response(payload, status_code=200):
    request = httpx.Request("GET", "https://api.github.com/users/octocat/repos")
    return httpx.Response(status_code, json=payload, request=request)


class TestFetchGithubRepos:
    def test_returns_repo_list(self):
        repos = [{"name": "hello-world"}]
        with patch("devconnector.integrations.github.httpx.get", return_value=_response(repos)) as mock_get:
            result = fetch_github_repos("octocat", NullCacheService())
        assert result == repos
        _, kwargs = mock_get.call_args
        assert kwargs["params"] == {"per_page": 5, "sort": "created:asc"}
        assert kwargs["timeout"] == 10.0

    def test_not_found_returns_none(self):
        with patch(
            "devconnector.integrations.github.httpx.get",
            return_value=_response({"message": "Not Found"}, status_code=404),
        ):
            assert fetch_github_repos("nobody-here", NullCacheService()) is None

    def test_network_error_returns_none(self):
        with patch("devconnector.integrations.github.httpx.get", side_effect=httpx.ConnectTimeout("timeout")):
            assert fetch_github_repos("octocat", NullCacheService()) is None

    def test_cached_result_skips_request(self):
        cache = _DictCache()
        with patch("devconnector.integrations.github.httpx.get", return_value=_response([{"name": "a"}])):
            fetch_github_repos("Octocat", cache)
        mock_get = MagicMock()
        with patch("devconnector.integrations.github.httpx.get", mock_get):
            result = fetch_github_repos("octocat", cache)
        assert result == [{"name": "a"}]
        mock_get.assert_not_called()
