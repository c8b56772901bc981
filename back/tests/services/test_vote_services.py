from datetime import timedelta
import uuid

import pytest

from app.db_selectors.issues import get_vote
from app.models.issues.issue import IssueStatus
from app.models.issues.vote import VoteType
from app.services.issues import cast_vote, get_user_vote
from app.services.service_errors import NotFoundError, ValidationError


@pytest.fixture
def voters(make_user):
    async def _voters(count: int):
        return [await make_user() for _ in range(count)]

    return _voters


async def test_first_vote_is_recorded(db, reporter, make_issue, config, now):
    issue = await make_issue(reporter)

    result = await cast_vote(db, issue.id, reporter.id, "upvote", config, now=now)

    assert (result.upvotes, result.downvotes) == (1, 0)
    assert result.vote_type == VoteType.UPVOTE
    assert result.verification_score == 60
    assert await get_user_vote(db, issue.id, reporter.id) == VoteType.UPVOTE


async def test_repeating_a_vote_retracts_it(db, reporter, make_issue, config, now):
    issue = await make_issue(reporter)
    await cast_vote(db, issue.id, reporter.id, VoteType.UPVOTE, config, now=now)

    result = await cast_vote(db, issue.id, reporter.id, VoteType.UPVOTE, config, now=now)

    assert (result.upvotes, result.downvotes) == (0, 0)
    assert result.vote_type is None
    assert result.verification_score == 10
    assert await get_vote(db, issue.id, reporter.id) is None


async def test_opposite_vote_flips_it(db, reporter, make_issue, config, now):
    issue = await make_issue(reporter)
    await cast_vote(db, issue.id, reporter.id, VoteType.UPVOTE, config, now=now)

    result = await cast_vote(db, issue.id, reporter.id, VoteType.DOWNVOTE, config, now=now)

    assert (result.upvotes, result.downvotes) == (0, 1)
    assert result.vote_type == VoteType.DOWNVOTE
    assert await get_user_vote(db, issue.id, reporter.id) == VoteType.DOWNVOTE


async def test_counters_track_votes_across_users(db, reporter, make_issue, voters, config, now):
    issue = await make_issue(reporter)
    users = await voters(4)

    for user in users[:3]:
        await cast_vote(db, issue.id, user.id, VoteType.UPVOTE, config, now=now)
    await cast_vote(db, issue.id, users[3].id, VoteType.DOWNVOTE, config, now=now)
    await cast_vote(db, issue.id, users[0].id, VoteType.UPVOTE, config, now=now)

    await db.refresh(issue)
    assert (issue.upvotes, issue.downvotes) == (2, 1)


async def test_third_upvote_auto_verifies(db, reporter, make_issue, voters, config, now):
    issue = await make_issue(reporter, images=["a.jpg"])
    users = await voters(3)

    results = [await cast_vote(db, issue.id, user.id, VoteType.UPVOTE, config, now=now) for user in users]

    assert [result.is_verified for result in results] == [False, False, True]
    await db.refresh(issue)
    assert issue.is_verified is True
    assert issue.status == IssueStatus.VERIFIED
    assert issue.verification_score == 70
    assert issue.verified_at is not None


async def test_verification_is_not_repeated(db, reporter, make_issue, voters, config, now):
    verified_at = now - timedelta(hours=1)
    issue = await make_issue(
        reporter,
        upvotes=3,
        images=["a.jpg"],
        is_verified=True,
        verified_at=verified_at,
        status=IssueStatus.IN_PROGRESS,
    )
    (user,) = await voters(1)

    await cast_vote(db, issue.id, user.id, VoteType.UPVOTE, config, now=now)

    await db.refresh(issue)
    assert issue.status == IssueStatus.IN_PROGRESS
    assert issue.verified_at.replace(tzinfo=None) == verified_at.replace(tzinfo=None)


async def test_invalid_vote_type_is_rejected(db, reporter, make_issue, config):
    issue = await make_issue(reporter)

    with pytest.raises(ValidationError) as exc_info:
        await cast_vote(db, issue.id, reporter.id, "sideways", config)

    assert exc_info.value.message == 'Invalid vote type. Must be "upvote" or "downvote"'


async def test_vote_on_unknown_issue(db, reporter, config):
    with pytest.raises(NotFoundError):
        await cast_vote(db, uuid.uuid4(), reporter.id, VoteType.UPVOTE, config)


async def test_user_without_vote(db, reporter, make_issue):
    issue = await make_issue(reporter)
    assert await get_user_vote(db, issue.id, reporter.id) is None


async def test_votes_never_reopen_a_rejected_issue(db, reporter, make_issue, voters, config, now):
    issue = await make_issue(reporter, images=["a.jpg"], status=IssueStatus.REJECTED)
    users = await voters(3)

    for user in users:
        await cast_vote(db, issue.id, user.id, VoteType.UPVOTE, config, now=now)

    await db.refresh(issue)
    assert issue.status == IssueStatus.REJECTED
    assert issue.is_verified is True
