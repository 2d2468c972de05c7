"""
Application common module.

Contains shared building blocks for the application layer:
- Result: Result type for use case outcomes
- Notification: User-facing message emitted at collaborator boundaries
"""

from .notifications import Notification, NotificationLevel, NotifierProtocol
from .result import Failure, Result, Success

__all__ = [
    "Failure",
    "Notification",
    "NotificationLevel",
    "NotifierProtocol",
    "Result",
    "Success",
]
