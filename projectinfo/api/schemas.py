# /projectinfo/api/schemas.py
# This module defines the response schema for the Project Info API.
from pydantic import BaseModel, Field
from typing import List


class ProjectInfoResponse(BaseModel):
    project: str
    owner: str
    committer: str = ""
    commits: int = 0
    language: List[str] = Field(default_factory=list, description="Languages detected by GitHub, in no particular order")
