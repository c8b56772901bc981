from app.models.issues.issue import IssueCategory, IssueStatus

from ..fakes import auth_headers


async def test_overview_stats(client, reporter, make_issue):
    await make_issue(reporter, status=IssueStatus.RESOLVED)
    await make_issue(reporter, title="Dark lane", category=IssueCategory.STREETLIGHT)
    await make_issue(reporter, title="Another dark lane", category=IssueCategory.STREETLIGHT)

    response = await client.get("/api/v1/stats/overview", headers=auth_headers(reporter))

    assert response.status_code == 200
    data = response.json()
    assert data["categories"] == [{"category": "streetlight", "count": 2}, {"category": "pothole", "count": 1}]
    assert data["totals"] == {"total": 3, "resolved": 1, "resolution_rate": 33.3}


async def test_overview_stats_require_authentication(client):
    response = await client.get("/api/v1/stats/overview")
    assert response.status_code == 401


async def test_admin_statistics(client, reporter, admin, make_issue):
    await make_issue(reporter)

    response = await client.get("/api/v1/admin/stats", headers=auth_headers(admin))

    assert response.status_code == 200
    data = response.json()
    assert data["overview"]["total_issues"] == 1
    assert data["overview"]["reported_issues"] == 1
    assert data["overview"]["total_users"] == 2
    assert [issue["title"] for issue in data["recent_issues"]] == ["Big pothole near market"]


async def test_admin_users(client, reporter, admin):
    response = await client.get("/api/v1/admin/users", headers=auth_headers(admin))

    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 2
    assert {user["username"] for user in data["users"]} == {"reporter", "admin"}


async def test_admin_reports_are_admin_only(client, reporter):
    for path in ("/api/v1/admin/stats", "/api/v1/admin/users"):
        response = await client.get(path, headers=auth_headers(reporter))
        assert response.status_code == 403


async def test_leaderboard_reflects_resolved_issues(client, reporter, admin, make_user, make_issue):
    await make_user(username="newcomer")
    issue = await make_issue(reporter)
    await client.put(
        f"/api/v1/admin/issues/{issue.id}/status",
        json={"status": "resolved"},
        headers=auth_headers(admin),
    )

    response = await client.get("/api/v1/users/leaderboard")

    assert response.status_code == 200
    data = response.json()
    assert [(entry["username"], entry["reputation_score"]) for entry in data] == [("reporter", 10), ("newcomer", 0)]
    assert "email" not in data[0]
