"""Notification data models.

Contains:
- Notification: One GitHub notification thread
- NotificationCount: Count lookup result that distinguishes "unavailable" from zero
"""

from typing import ClassVar

from pydantic import BaseModel, Field

from branchline.input import Text


class NotificationSubject(BaseModel):
    title: Text = ""
    url: Text = ""
    type: Text = ""


class NotificationRepository(BaseModel):
    full_name: Text = ""


class Notification(BaseModel):
    """A notification thread as returned by the GitHub API.

    Only the fields shown by the CLI are modeled; the rest are ignored.
    """

    id: Text = ""
    reason: Text = ""
    unread: bool = False
    subject: NotificationSubject = Field(default_factory=NotificationSubject)
    repository: NotificationRepository = Field(default_factory=NotificationRepository)


class NotificationCount(BaseModel):
    """Result of a notification count lookup.

    ``available`` is False when no token is configured or the fetch failed,
    in which case ``count`` carries no information.
    """

    SENTINEL: ClassVar[int] = -1

    available: bool
    count: int = 0

    @classmethod
    def of(cls, count: int) -> "NotificationCount":
        return cls(available=True, count=count)

    @classmethod
    def unavailable(cls) -> "NotificationCount":
        return cls(available=False)

    def as_sentinel(self) -> int:
        """Return the count, or -1 when unavailable."""
        return self.count if self.available else self.SENTINEL
