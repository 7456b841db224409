from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List

from airwatch.core.database import get_db
from airwatch.core.logger import get_logger
from airwatch.crud import devices, readings, users
from airwatch.models.user import User
from airwatch.schemas.device import (
    DeviceCreate,
    DeviceDelete,
    DeviceDeleted,
    DeviceExists,
    DeviceReading,
)
from airwatch.schemas.response import MessageResponse

logger = get_logger(__name__)

router = APIRouter(tags=["Devices"])


def _require_user(db: Session, email: str) -> User:
    user = users.get_user_by_email(db, email)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.post("/add-device", response_model=MessageResponse)
def add_device(
    data: DeviceCreate,
    db: Session = Depends(get_db)
):
    user = _require_user(db, data.userEmail)

    device = devices.add_device(db, user.id, data.name, data.mac_address)

    logger.info("device_added", user_id=user.id, device_id=device.id, mac_address=device.mac_address)
    return {"message": "Device added successfully"}


@router.get("/get-devices", response_model=List[DeviceReading])
def get_devices(
    userEmail: str = Query(...),
    db: Session = Depends(get_db)
):
    user = _require_user(db, userEmail)
    return readings.latest_readings_for_user(db, user.id)


@router.get("/check-device", response_model=DeviceExists)
def check_device(
    mac_address: str = Query(...),
    db: Session = Depends(get_db)
):
    return {"exists": readings.mac_has_readings(db, mac_address)}


@router.delete("/delete-device", response_model=DeviceDeleted)
def delete_device(
    data: DeviceDelete,
    db: Session = Depends(get_db)
):
    user = _require_user(db, data.userEmail)

    deleted = devices.delete_device(db, user.id, data.mac_address)
    if deleted == 0:
        logger.warning("device_delete_noop", user_id=user.id, mac_address=data.mac_address)
    else:
        logger.info("device_deleted", user_id=user.id, mac_address=data.mac_address, deleted=deleted)

    return {
        "message": "Device deleted successfully",
        "deleted": deleted
    }
