# /projectinfo/services/projectinfo_service.py
# This module defines the ProjectInfoService class, which combines a repository's languages
# and its top contributor into one summary.
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..services.github_client import GitHubClient


@dataclass
class ProjectInfo:
    project: str
    owner: str
    committer: str = ""
    commits: int = 0
    language: List[str] = field(default_factory=list)


class ProjectInfoService:
    def __init__(self, github: GitHubClient) -> None:
        self.github = github

    async def get_project_info(self, owner: str, repo: str) -> ProjectInfo:
        languages = await self.github.get_languages(owner, repo)
        contributors = await self.github.get_contributors(owner, repo)

        info = ProjectInfo(project=repo, owner=owner, language=list(languages.keys()))
        if contributors:
            top = contributors[0]
            info.committer = top.login
            info.commits = top.contributions
        return info
