"""Matched request path model."""

from pydantic import BaseModel


class MatchedPath(BaseModel):
    """Components extracted from an inbound raw-file path.

    ``repo_identifier`` is the lowercased ``owner/repo`` pair; ``branch``
    and ``file_path`` keep their original casing.
    """

    repo_identifier: str
    branch: str
    file_path: str

    class Config:
        frozen = True
