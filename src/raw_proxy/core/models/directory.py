"""GitLab repository directory models."""

from collections.abc import Iterable

from pydantic import AliasChoices, BaseModel, Field, RootModel, model_validator


class RepoDirectoryEntry(BaseModel):
    """A project as returned by GitLab's project-listing API.

    GitLab names the namespaced path ``path_with_namespace``; the cached
    record uses ``full_path``. Both are accepted on input.
    """

    id: int
    path: str
    full_path: str = Field(
        validation_alias=AliasChoices("full_path", "path_with_namespace"),
    )
    # Empty projects have no default branch on GitLab.
    default_branch: str | None = None


class RepoDirectory(RootModel[dict[str, RepoDirectoryEntry]]):
    """Mapping of lowercased ``namespace/repo`` to project metadata.

    Always rebuilt wholesale from a provider listing, never patched.
    """

    root: dict[str, RepoDirectoryEntry] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_keys(self) -> "RepoDirectory":
        for key, entry in self.root.items():
            if key != entry.full_path.lower():
                raise ValueError(
                    f"Directory key {key!r} does not match full_path {entry.full_path!r}"
                )
        return self

    @classmethod
    def from_entries(cls, entries: Iterable[RepoDirectoryEntry]) -> "RepoDirectory":
        """Build a directory keyed by lowercased full path."""
        return cls({entry.full_path.lower(): entry for entry in entries})

    def lookup(self, owner_repo: str) -> RepoDirectoryEntry | None:
        return self.root.get(owner_repo.lower())

    def __contains__(self, owner_repo: object) -> bool:
        return isinstance(owner_repo, str) and owner_repo.lower() in self.root

    def __len__(self) -> int:
        return len(self.root)
