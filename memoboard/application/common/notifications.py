"""User-facing notifications raised at collaborator boundaries."""

from dataclasses import dataclass
from typing import Literal, Protocol

NotificationLevel = Literal["success", "error"]


@dataclass(frozen=True)
class Notification:
    """Short message shown to the user, e.g. as a toast."""

    level: NotificationLevel
    title: str
    message: str

    @classmethod
    def success(cls, message: str, title: str = "Saved") -> "Notification":
        return cls(level="success", title=title, message=message)

    @classmethod
    def error(cls, message: str, title: str = "Error") -> "Notification":
        return cls(level="error", title=title, message=message)


class NotifierProtocol(Protocol):
    def notify(self, notification: Notification) -> None: ...
