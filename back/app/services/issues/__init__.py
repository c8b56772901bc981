# Local application imports
from app.services.issues.admin_services import update_issue_status
from app.services.issues.issue_services import (
    IssueSubmission,
    check_auto_verify,
    delete_issue,
    find_nearby_issues,
    get_issue,
    get_verification_score,
    submit_issue,
    update_issue,
)
from app.services.issues.vote_services import VoteResult, cast_vote, get_user_vote

__all__ = [
    "IssueSubmission",
    "VoteResult",
    "cast_vote",
    "check_auto_verify",
    "delete_issue",
    "find_nearby_issues",
    "get_issue",
    "get_user_vote",
    "get_verification_score",
    "submit_issue",
    "update_issue",
    "update_issue_status",
]
