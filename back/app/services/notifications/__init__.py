# Local application imports
from app.services.notifications.notifier import IssueNotifier, LoggingIssueNotifier, MailgunIssueNotifier
from app.settings.common import CommonSettings


def build_notifier(settings: CommonSettings) -> IssueNotifier:
    """Mailgun when credentials are configured, the log otherwise."""
    if settings.MAILGUN_API_KEY and settings.MAILGUN_DOMAIN:
        return MailgunIssueNotifier(
            api_key=settings.MAILGUN_API_KEY,
            domain=settings.MAILGUN_DOMAIN,
            admin_email=settings.ADMIN_EMAIL,
            base_url=settings.MAILGUN_BASE_URL,
        )
    return LoggingIssueNotifier()


__all__ = ["IssueNotifier", "LoggingIssueNotifier", "MailgunIssueNotifier", "build_notifier"]
