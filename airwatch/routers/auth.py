from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from airwatch.core.database import get_db
from airwatch.core.logger import get_logger
from airwatch.core.security import (
    PASSWORD_POLICY_MESSAGE,
    hash_password,
    is_strong_password,
    verify_and_update_password,
)
from airwatch.crud import users
from airwatch.schemas.response import MessageResponse
from airwatch.schemas.user import UserRegister, UserLogin

logger = get_logger(__name__)

router = APIRouter(tags=["Auth"])


@router.post("/register", response_model=MessageResponse)
def register(data: UserRegister, db: Session = Depends(get_db)):
    if not is_strong_password(data.password):
        raise HTTPException(status_code=400, detail=PASSWORD_POLICY_MESSAGE)

    conflict = users.find_conflict(db, data.email, data.username, data.phoneNumber)
    if conflict:
        raise HTTPException(status_code=400, detail=conflict)

    try:
        users.create_user(
            db,
            name=data.name,
            username=data.username,
            hashed_password=hash_password(data.password),
            email=data.email,
            phone_number=data.phoneNumber,
        )
    except IntegrityError:
        # a concurrent registration won the race past the checks above
        db.rollback()
        conflict = users.find_conflict(db, data.email, data.username, data.phoneNumber)
        logger.warning("register_conflict", username=data.username, conflict=conflict)
        raise HTTPException(status_code=400, detail=conflict or "Account already exists")

    logger.info("user_registered", username=data.username)
    return {"message": "Registration successful"}


@router.post("/login", response_model=MessageResponse)
def login(data: UserLogin, db: Session = Depends(get_db)):
    user = users.get_user_by_email(db, data.email)
    if not user:
        raise HTTPException(status_code=400, detail="Email not found")

    verified, new_hash = verify_and_update_password(data.password, user.password)
    if not verified:
        logger.info("login_failed", user_id=user.id)
        raise HTTPException(status_code=400, detail="Incorrect password")

    if new_hash:
        users.set_password_hash(db, user, new_hash)
        logger.info("password_rehashed", user_id=user.id)

    return {"message": "Login successful"}
