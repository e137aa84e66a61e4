# mindflow/routers/auth.py
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from mindflow.core.security import get_current_user
from mindflow.db.session import get_db
from mindflow.models.user import User
from mindflow.schemas.auth import LoginIn, RegisterIn, TokenOut
from mindflow.schemas.user import UserOut
from mindflow.services import auth_service

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/login", response_model=TokenOut)
def login(body: LoginIn, db: Session = Depends(get_db)):
    user = auth_service.validate_user(db, body.email, body.password)
    if not user:
        logger.info("Failed login attempt")
        raise HTTPException(status_code=401, detail="Invalid credentials")

    logger.info("User logged in: id=%s", user["id"])
    return auth_service.login(user)


@router.post("/register", response_model=TokenOut, status_code=201)
def register(body: RegisterIn, db: Session = Depends(get_db)):
    try:
        return auth_service.register(db, body.email, body.password, body.name)
    except auth_service.EmailTakenError:
        raise HTTPException(status_code=409, detail="Email already registered")
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Registering user failed: %s", e)
        raise HTTPException(status_code=500, detail="Failed to register user")


@router.get("/me", response_model=UserOut)
def me(user: User = Depends(get_current_user)):
    return user
