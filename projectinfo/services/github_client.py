# /projectinfo/services/github_client.py
# This module defines a GitHubClient class that queries the GitHub API for a repository's
# languages and contributors and decodes the answers.
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from ..settings import settings
from ..utils.errors import conflict, not_found

logger = logging.getLogger(__name__)


class Contributor(BaseModel):
    login: str = ""
    contributions: int = 0


_languages_adapter = TypeAdapter(Optional[Dict[str, Any]])
_contributors_adapter = TypeAdapter(Optional[List[Contributor]])


def _repo_path(owner: str, repo: str, endpoint: str) -> str:
    # owner and repo stay single path segments, even with "/", "?" or "#" in them
    return f"/repos/{quote(owner, safe='')}/{quote(repo, safe='')}/{endpoint}"


class GitHubClient:
    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": "projectinfo/0.1",
        }
        if settings.github_token:
            headers["Authorization"] = f"Bearer {settings.github_token}"

        kwargs: Dict[str, Any] = {}
        if settings.http_timeout_s is not None:
            kwargs["timeout"] = httpx.Timeout(settings.http_timeout_s)

        self._client = httpx.AsyncClient(
            base_url=settings.github_api_base,
            headers=headers,
            transport=transport,
            **kwargs,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get_languages(self, owner: str, repo: str) -> Dict[str, Any]:
        """
        Language name -> bytes of code. Only the keys matter to callers.

        New repositories report no languages, so an empty body is an empty mapping.
        """
        try:
            r = await self._client.get(_repo_path(owner, repo, "languages"))
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.warning("languages request for %s/%s failed: %s", owner, repo, e)
            raise not_found("Could not reach language of repo") from e

        if not r.content.strip():
            return {}

        try:
            data = _languages_adapter.validate_json(r.content)
        except ValidationError as e:
            logger.warning("languages body for %s/%s did not decode (HTTP %s)", owner, repo, r.status_code)
            raise conflict(f"Languages: Error parsing the expected JSON body\n{e}") from e
        return data or {}

    async def get_contributors(self, owner: str, repo: str) -> List[Contributor]:
        """
        Contributors sorted by contributions, highest first (GitHub's order, untouched).

        An empty body means no contribution history. GitHub sends an error object
        instead of a list for repositories that do not exist, which fails decoding.
        """
        try:
            r = await self._client.get(_repo_path(owner, repo, "contributors"))
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.warning("contributors request for %s/%s failed: %s", owner, repo, e)
            raise not_found("Could not reach contributors of repo") from e

        if not r.content.strip():
            logger.info("no contributors reported for %s/%s (HTTP %s)", owner, repo, r.status_code)
            return []

        try:
            data = _contributors_adapter.validate_json(r.content)
        except ValidationError as e:
            logger.warning("contributors body for %s/%s did not decode (HTTP %s)", owner, repo, r.status_code)
            raise not_found("Contributors: Error parsing the expected JSON body") from e
        return data or []
