from datetime import timedelta

import pytest

from app.models.issues.issue import IssueCategory, IssueStatus
from app.models.issues.vote import Vote, VoteType
from app.services.stats import get_admin_statistics, get_leaderboard, get_overview_stats, list_users, resolution_rate


@pytest.fixture
def seeded_issues(db, reporter, make_issue, now):
    async def _seed():
        return [
            await make_issue(reporter, title="Pothole A", status=IssueStatus.RESOLVED, created_at=now - timedelta(hours=4)),
            await make_issue(reporter, title="Pothole B", status=IssueStatus.REJECTED, created_at=now - timedelta(hours=3)),
            await make_issue(reporter, title="Pothole C", created_at=now - timedelta(hours=2)),
            await make_issue(
                reporter,
                title="Dark lane",
                category=IssueCategory.STREETLIGHT,
                status=IssueStatus.RESOLVED,
                created_at=now - timedelta(hours=1),
            ),
        ]

    return _seed


@pytest.mark.parametrize("resolved, total, expected", [(0, 0, 0.0), (2, 4, 50.0), (1, 3, 33.3), (2, 3, 66.7)])
def test_resolution_rate(resolved, total, expected):
    assert resolution_rate(resolved, total) == expected


async def test_overview_of_empty_database(db):
    stats = await get_overview_stats(db)

    assert stats.categories == []
    assert stats.statuses == []
    assert (stats.totals.total, stats.totals.resolved, stats.totals.resolution_rate) == (0, 0, 0.0)


async def test_overview_groups_by_category_and_status(db, seeded_issues):
    await seeded_issues()

    stats = await get_overview_stats(db)

    assert [(item.category, item.count) for item in stats.categories] == [
        (IssueCategory.POTHOLE, 3),
        (IssueCategory.STREETLIGHT, 1),
    ]
    assert stats.statuses[0].status == IssueStatus.RESOLVED
    assert {item.status: item.count for item in stats.statuses} == {
        IssueStatus.RESOLVED: 2,
        IssueStatus.REJECTED: 1,
        IssueStatus.REPORTED: 1,
    }
    assert (stats.totals.total, stats.totals.resolved, stats.totals.resolution_rate) == (4, 2, 50.0)


async def test_admin_statistics(db, reporter, make_user, seeded_issues):
    issues = await seeded_issues()
    voter = await make_user()
    db.add_all(
        [
            Vote(issue_id=issues[2].id, user_id=voter.id, vote_type=VoteType.UPVOTE),
            Vote(issue_id=issues[3].id, user_id=voter.id, vote_type=VoteType.DOWNVOTE),
        ]
    )
    await db.commit()

    stats = await get_admin_statistics(db, recent_limit=2)

    overview = stats.overview
    assert overview.total_issues == 4
    assert (overview.reported_issues, overview.verified_issues, overview.in_progress_issues) == (1, 0, 0)
    assert (overview.resolved_issues, overview.rejected_issues) == (2, 1)
    assert overview.total_users == 2
    assert overview.total_votes == 2
    assert [item.count for item in stats.issues_by_category] == [3, 1]
    assert [issue.title for issue in stats.recent_issues] == ["Dark lane", "Pothole C"]


async def test_users_are_listed_newest_first(db, make_user, now):
    older = await make_user(username="older", created_at=now - timedelta(days=2))
    newer = await make_user(username="newer", created_at=now - timedelta(days=1))

    assert [user.id for user in await list_users(db)] == [newer.id, older.id]


async def test_leaderboard_ranks_active_citizens(db, make_user):
    await make_user(username="bea", reputation_score=30)
    await make_user(username="arun", reputation_score=30)
    await make_user(username="chen", reputation_score=10)
    await make_user(username="root", reputation_score=99, is_admin=True)
    await make_user(username="gone", reputation_score=50, is_active=False)

    leaders = await get_leaderboard(db)

    assert [(user.username, user.reputation_score) for user in leaders] == [("arun", 30), ("bea", 30), ("chen", 10)]


async def test_leaderboard_is_limited(db, make_user):
    for score in range(5):
        await make_user(username=f"citizen{score}", reputation_score=score)

    leaders = await get_leaderboard(db, limit=2)

    assert [user.username for user in leaders] == ["citizen4", "citizen3"]
