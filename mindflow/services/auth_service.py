# mindflow/services/auth_service.py
import logging
from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mindflow.core.security import hash_password, verify_password, create_access_token
from mindflow.models.user import User

logger = logging.getLogger(__name__)


class EmailTakenError(Exception):
    pass


def _normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def find_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == _normalize_email(email)).first()


def validate_user(db: Session, email: str, password: str) -> Optional[Dict[str, Any]]:
    """
    Check credentials.

    Returns the user as a dict without the password hash on match,
    None otherwise.
    """
    user = find_by_email(db, email)
    if user and verify_password(password, user.password):
        return {"id": user.id, "email": user.email, "name": user.name}
    return None


def login(user: Dict[str, Any]) -> Dict[str, Any]:
    token = create_access_token(user_id=user["id"], email=user["email"])
    return {
        "access_token": token,
        "user": {"id": user["id"], "email": user["email"], "name": user.get("name")},
    }


def register(db: Session, email: str, password: str, name: Optional[str] = None) -> Dict[str, Any]:
    """Hash the password, persist the user and log them in straight away."""
    email = _normalize_email(email)
    if find_by_email(db, email):
        raise EmailTakenError(email)

    user = User(email=email, password=hash_password(password), name=(name or "").strip() or None)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # lost a race against a concurrent registration
        db.rollback()
        raise EmailTakenError(email)
    db.refresh(user)

    logger.info("New user registered: id=%s", user.id)
    return login({"id": user.id, "email": user.email, "name": user.name})
