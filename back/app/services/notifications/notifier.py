# Standard library imports
from abc import ABC, abstractmethod

# Third-party imports
import httpx

# Local application imports
from app.core.monitoring.logging import get_contextual_logger, get_logger
from app.models.auth.user import User
from app.models.issues.issue import Issue, IssueStatus

logger = get_logger(__name__)


def _label(value: object) -> str:
    return str(getattr(value, "value", value)).replace("_", " ")


class IssueNotifier(ABC):
    """
    Outbound notifications about issues.

    One instance is built at startup and shared by every request; services
    receive it as a parameter instead of reaching for a module global.
    """

    @abstractmethod
    async def issue_created(self, issue: Issue) -> None:
        """Tell the administrators a new issue was reported."""

    @abstractmethod
    async def issue_status_changed(self, issue: Issue, reporter: User | None, status: IssueStatus) -> None:
        """Tell the reporter their issue moved to ``status``."""

    async def aclose(self) -> None:
        return None


class LoggingIssueNotifier(IssueNotifier):
    """Writes notifications to the log, used when no mail provider is configured."""

    async def issue_created(self, issue: Issue) -> None:
        get_contextual_logger(__name__, issue_id=issue.id).info(
            f"New issue reported: {issue.title} ({IssueStatus(issue.status).value})"
        )

    async def issue_status_changed(self, issue: Issue, reporter: User | None, status: IssueStatus) -> None:
        get_contextual_logger(__name__, issue_id=issue.id).info(
            f"Issue status changed to {IssueStatus(status).value}, reporter={reporter.email if reporter else None}"
        )


class MailgunIssueNotifier(IssueNotifier):
    """Sends notification emails through the Mailgun messages API."""

    def __init__(
        self,
        api_key: str,
        domain: str,
        admin_email: str,
        base_url: str = "https://api.mailgun.net/v3",
        client: httpx.AsyncClient | None = None,
    ):
        self.domain = domain
        self.admin_email = admin_email
        self.url = f"{base_url.rstrip('/')}/{domain}/messages"
        self.auth = ("api", api_key)
        self.client = client or httpx.AsyncClient(timeout=30.0)

    async def send_email(self, to_email: str, subject: str, text: str) -> None:
        data = {
            "from": f"CivicReport <noreply@{self.domain}>",
            "to": to_email,
            "subject": subject,
            "text": text,
        }
        try:
            response = await self.client.post(self.url, auth=self.auth, data=data)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(f"Mailgun rejected email to {to_email}: {exc.response.status_code} {exc.response.text}")
            raise

    async def issue_created(self, issue: Issue) -> None:
        await self.send_email(
            self.admin_email,
            subject=f"New issue reported: {issue.title}",
            text=(
                f"A new {_label(issue.category)} issue was reported at {issue.address}.\n\n"
                f"{issue.description}\n\nIssue ID: {issue.id}"
            ),
        )

    async def issue_status_changed(self, issue: Issue, reporter: User | None, status: IssueStatus) -> None:
        if reporter is None:
            return
        label = _label(status)
        await self.send_email(
            reporter.email,
            subject=f"Your issue is now {label}",
            text=f"Hi {reporter.username},\n\nYour report \"{issue.title}\" has been marked as {label}.",
        )

    async def aclose(self) -> None:
        await self.client.aclose()
