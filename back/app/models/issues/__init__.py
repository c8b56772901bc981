# Local application imports
from app.models.issues.issue import Issue, IssueCategory, IssuePriority, IssueStatus
from app.models.issues.vote import Vote, VoteType

__all__ = ["Issue", "IssueCategory", "IssuePriority", "IssueStatus", "Vote", "VoteType"]
