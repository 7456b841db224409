from sqlalchemy.orm import Session

from airwatch.models.device import Device


def add_device(db: Session, user_id: int, device_name: str, mac_address: str) -> Device:
    device = Device(
        user_id=user_id,
        device_name=device_name,
        mac_address=mac_address,
    )
    db.add(device)
    db.commit()
    db.refresh(device)
    return device


def delete_device(db: Session, user_id: int, mac_address: str) -> int:
    """Delete the user's devices with this MAC and return how many went."""
    deleted = db.query(Device).filter(
        Device.user_id == user_id,
        Device.mac_address == mac_address
    ).delete(synchronize_session=False)
    db.commit()
    return deleted
