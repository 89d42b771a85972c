# catalog/core/security.py
"""
Bearer token authentication.

Plain text tokens look like ``"<token id>|<secret>"``. Only the SHA-256 of the
secret is stored, so a leaked table does not leak usable credentials.
"""

import hashlib
import hmac
import logging
import secrets
from datetime import datetime, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from catalog.core.database import fits_integer_id, get_db
from catalog.models.personal_access_token import PersonalAccessToken
from catalog.models.user import User

logger = logging.getLogger(__name__)

TOKEN_SECRET_BYTES = 30

bearer_scheme = HTTPBearer(auto_error=False)


def hash_token(secret: str) -> str:
    return hashlib.sha256(secret.encode("utf-8")).hexdigest()


def issue_token(db: Session, user: User, name: str) -> str:
    """Persist a new access token for ``user`` and return its plain text form."""
    secret = secrets.token_urlsafe(TOKEN_SECRET_BYTES)
    token = PersonalAccessToken(user_id=user.id, name=name, token=hash_token(secret))

    db.add(token)
    db.commit()
    db.refresh(token)

    logger.info(f"Issued access token {token.id} ({name}) for user {user.id}")
    return f"{token.id}|{secret}"


def find_token(db: Session, plain_text: str) -> Optional[PersonalAccessToken]:
    """Resolve a plain text token, with or without its ``id|`` prefix."""
    if "|" not in plain_text:
        return (
            db.query(PersonalAccessToken)
            .filter(PersonalAccessToken.token == hash_token(plain_text))
            .first()
        )

    token_id, secret = plain_text.split("|", 1)
    if not token_id.isdigit() or not fits_integer_id(int(token_id)):
        return None

    token = db.get(PersonalAccessToken, int(token_id))
    if token is None or not hmac.compare_digest(token.token, hash_token(secret)):
        return None
    return token


def _unauthenticated() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthenticated.",
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """
    FastAPI dependency guarding the API routes.

    Raises:
        HTTPException: 401 when the header is missing, malformed or the
            token is unknown.
    """
    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        logger.warning("AUTH: request without bearer token rejected")
        raise _unauthenticated()

    token = find_token(db, credentials.credentials)
    if token is None:
        logger.warning("AUTH: unknown bearer token rejected")
        raise _unauthenticated()

    token.last_used_at = datetime.now(timezone.utc)
    db.commit()

    return token.user
