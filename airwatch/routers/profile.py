from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from airwatch.core.database import get_db
from airwatch.core.logger import get_logger
from airwatch.core.security import PASSWORD_POLICY_MESSAGE, hash_password, is_strong_password
from airwatch.crud import users
from airwatch.schemas.response import MessageResponse
from airwatch.schemas.user import ProfileResponse, ChangePassword

logger = get_logger(__name__)

router = APIRouter(tags=["Profile"])


@router.get("/profile-data", response_model=ProfileResponse)
def get_profile(
    email: str = Query(...),
    db: Session = Depends(get_db)
):
    user = users.get_user_by_email(db, email)
    if not user:
        raise HTTPException(status_code=404, detail="Profile not found")

    return user


@router.post("/changepassword", response_model=MessageResponse)
def change_password(
    password_data: ChangePassword,
    db: Session = Depends(get_db)
):
    if not is_strong_password(password_data.password):
        raise HTTPException(status_code=400, detail=PASSWORD_POLICY_MESSAGE)

    updated = users.update_password(
        db, password_data.username, hash_password(password_data.password)
    )
    if updated == 0:
        raise HTTPException(status_code=404, detail="User not found")

    logger.info("password_changed", username=password_data.username)
    return {"message": "Password has been changed successfully"}
