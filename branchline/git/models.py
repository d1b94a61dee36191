"""Git change summary models.

Contains Pydantic models produced by the status classifier:
- DiffStat: Aggregate files/insertions/deletions from ``git diff --shortstat``
- GitChangeSummary: Per-stage counts of added, modified and deleted paths
"""

from typing import Optional

from pydantic import BaseModel, Field


class DiffStat(BaseModel):
    """Aggregate statistics from a shortstat summary line.

    Each field is None when its clause is missing from the summary line.
    """

    files_changed: Optional[int] = Field(default=None, ge=0)
    insertions: Optional[int] = Field(default=None, ge=0)
    deletions: Optional[int] = Field(default=None, ge=0)


class GitChangeSummary(BaseModel):
    """Counts of changed paths in a working tree, split by stage."""

    staged_added: int = Field(default=0, ge=0)
    staged_modified: int = Field(default=0, ge=0)
    staged_deleted: int = Field(default=0, ge=0)
    unstaged_added: int = Field(default=0, ge=0)
    unstaged_modified: int = Field(default=0, ge=0)
    unstaged_deleted: int = Field(default=0, ge=0)
    staged_diff_stat: Optional[DiffStat] = None
    unstaged_diff_stat: Optional[DiffStat] = None

    @property
    def has_staged_changes(self) -> bool:
        return bool(self.staged_added or self.staged_modified or self.staged_deleted)

    @property
    def has_unstaged_changes(self) -> bool:
        return bool(self.unstaged_added or self.unstaged_modified or self.unstaged_deleted)

    @property
    def is_clean(self) -> bool:
        return not (self.has_staged_changes or self.has_unstaged_changes)
