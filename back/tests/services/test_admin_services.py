from datetime import timedelta
import uuid

import pytest

from app.models.issues.issue import IssueStatus
from app.services.issues import update_issue_status
from app.services.service_errors import NotFoundError

from ..fakes import FailingNotifier


async def test_resolving_rewards_reporter(db, reporter, make_issue, notifier, now):
    issue = await make_issue(reporter, status=IssueStatus.IN_PROGRESS)

    updated = await update_issue_status(
        db, issue.id, IssueStatus.RESOLVED, notifier, admin_notes="Patched by crew 4", now=now
    )

    await db.refresh(reporter)
    assert updated.status == IssueStatus.RESOLVED
    assert updated.resolved_at is not None
    assert updated.admin_notes == "Patched by crew 4"
    assert reporter.reputation_score == 10
    assert notifier.status_changes == [(issue.id, reporter.id, IssueStatus.RESOLVED)]


async def test_resolving_twice_rewards_once(db, reporter, make_issue, notifier, now):
    issue = await make_issue(reporter)

    await update_issue_status(db, issue.id, IssueStatus.RESOLVED, notifier, now=now)
    await update_issue_status(db, issue.id, IssueStatus.RESOLVED, notifier, now=now + timedelta(hours=1))

    await db.refresh(reporter)
    assert reporter.reputation_score == 10


async def test_reputation_points_are_configurable(db, reporter, make_issue, notifier):
    issue = await make_issue(reporter)

    await update_issue_status(db, issue.id, "resolved", notifier, reputation_points=25)

    await db.refresh(reporter)
    assert reporter.reputation_score == 25


async def test_manual_verification_stamps_once(db, reporter, make_issue, notifier, now):
    issue = await make_issue(reporter)

    first = await update_issue_status(db, issue.id, IssueStatus.VERIFIED, notifier, now=now)
    first_verified_at = first.verified_at
    await update_issue_status(db, issue.id, IssueStatus.IN_PROGRESS, notifier, now=now)
    again = await update_issue_status(db, issue.id, IssueStatus.VERIFIED, notifier, now=now + timedelta(days=1))

    assert again.is_verified is True
    assert again.verified_at == first_verified_at


async def test_rejecting_keeps_existing_notes(db, reporter, make_issue, notifier):
    issue = await make_issue(reporter, admin_notes="Checked on site")

    updated = await update_issue_status(db, issue.id, IssueStatus.REJECTED, notifier)

    assert updated.status == IssueStatus.REJECTED
    assert updated.admin_notes == "Checked on site"
    await db.refresh(reporter)
    assert reporter.reputation_score == 0


async def test_notifier_failure_does_not_fail_status_change(db, reporter, make_issue):
    issue = await make_issue(reporter)

    updated = await update_issue_status(db, issue.id, IssueStatus.IN_PROGRESS, FailingNotifier())

    assert updated.status == IssueStatus.IN_PROGRESS


async def test_unknown_issue(db, notifier):
    with pytest.raises(NotFoundError):
        await update_issue_status(db, uuid.uuid4(), IssueStatus.RESOLVED, notifier)
