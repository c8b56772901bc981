# Standard library imports
from uuid import UUID

# Third-party imports
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from app.core.db import get_async_session
from app.db_selectors.issues import get_user_by_id
from app.models.auth.user import User
from app.services.notifications import IssueNotifier
from app.services.verification import VerificationConfig
from app.settings import settings

# Tokens are issued by the identity service, this API only verifies them
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_V1_STR}/auth/token", auto_error=False)


def _user_id_from_token(token: str) -> UUID | None:
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        return None
    subject = payload.get("sub")
    if subject is None:
        return None
    try:
        return UUID(str(subject))
    except ValueError:
        return None


async def get_current_user(token: str | None = Depends(oauth2_scheme), db: AsyncSession = Depends(get_async_session)) -> User:
    """Get current user from JWT token"""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if not token:
        raise credentials_exception

    user_id = _user_id_from_token(token)
    if user_id is None:
        raise credentials_exception

    user = await get_user_by_id(db, user_id)
    if user is None or not user.is_active:
        raise credentials_exception

    return user


async def get_current_admin(current_user: User = Depends(get_current_user)) -> User:
    if not current_user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return current_user


def get_verification_config() -> VerificationConfig:
    return VerificationConfig.from_settings(settings)


def get_notifier(request: Request) -> IssueNotifier:
    """The notifier built once at startup and kept on the application state."""
    return request.app.state.notifier
