# /projectinfo/services/path.py
# Parses the inbound request path into the GitHub owner and repository it names.
from __future__ import annotations

from dataclasses import dataclass

from ..utils.errors import bad_request


PREFIX = "projectinfo"
VERSION = "v1"
HOST = "github.com"

BAD_PATH_MESSAGE = f'Bad Request: the correct url is "/{PREFIX}/{VERSION}/{HOST}/<username>/<repo>"'


@dataclass(frozen=True)
class ProjectPath:
    owner: str
    repo: str


def parse_project_path(path: str) -> ProjectPath:
    """
    Validate ``/projectinfo/v1/github.com/<owner>/<repo>`` with an optional trailing slash.

    Owner and repo are taken verbatim; anything else raises a 400 AppError.
    """
    parts = path.split("/")
    # 6 parts, or 7 when the path ends with a slash
    if not (len(parts) == 6 or (len(parts) == 7 and parts[6] == "")):
        raise bad_request(BAD_PATH_MESSAGE)

    if parts[1] != PREFIX or parts[2] != VERSION or parts[3] != HOST:
        raise bad_request(BAD_PATH_MESSAGE)

    owner, repo = parts[4], parts[5]
    if not owner or not repo:
        raise bad_request(BAD_PATH_MESSAGE)

    return ProjectPath(owner=owner, repo=repo)
