from jose import jwt

from app.models.auth.user import User
from app.services.notifications import IssueNotifier
from app.settings import settings

BANGALORE = (12.9716, 77.5946)


class RecordingNotifier(IssueNotifier):
    def __init__(self):
        self.created = []
        self.status_changes = []
        self.closed = False

    async def issue_created(self, issue):
        self.created.append(issue.id)

    async def issue_status_changed(self, issue, reporter, status):
        self.status_changes.append((issue.id, reporter.id if reporter else None, status))

    async def aclose(self):
        self.closed = True


class FailingNotifier(IssueNotifier):
    async def issue_created(self, issue):
        raise RuntimeError("mail provider down")

    async def issue_status_changed(self, issue, reporter, status):
        raise RuntimeError("mail provider down")


def auth_headers(user: User) -> dict[str, str]:
    token = jwt.encode({"sub": str(user.id)}, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    return {"Authorization": f"Bearer {token}"}
