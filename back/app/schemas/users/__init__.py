from .user_schemas import LeaderboardEntry, UserListResponse, UserResponse

__all__ = ["LeaderboardEntry", "UserListResponse", "UserResponse"]
