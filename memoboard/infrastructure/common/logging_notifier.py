import structlog

from memoboard.application.common.notifications import Notification

logger = structlog.get_logger(__name__)


class LoggingNotifier:
    """Delivers user notifications to the structured log."""

    def notify(self, notification: Notification) -> None:
        log = logger.error if notification.level == "error" else logger.info
        log(
            "user_notified",
            kind=notification.level,
            title=notification.title,
            message=notification.message,
        )
