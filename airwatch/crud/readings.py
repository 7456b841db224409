"""Read path for sensor readings.

``sensor_data`` is append-only and written by the ingestion service; nothing
here writes to it.
"""
from sqlalchemy import and_, func
from sqlalchemy.orm import Session

from airwatch.models.device import Device
from airwatch.models.sensor_data import SensorReading

READING_FIELDS = (
    "timestamp",
    "temperature",
    "humidity",
    "fahrenheit",
    "co2",
    "eco2",
    "tvoc",
    "rawh2",
    "rawethanol",
    "dust",
)


def latest_readings_for_user(db: Session, user_id: int) -> list[dict]:
    """Return every device owned by ``user_id`` with its most recent reading.

    Devices that never reported come back with all reading fields set to
    ``None``. The whole result is produced by a single statement:

    1. per MAC, the maximum timestamp in ``sensor_data``;
    2. the full reading rows matching those ``(mac_address, timestamp)`` pairs;
    3. the user's devices left-joined onto those rows by MAC.

    If several rows share the maximum timestamp for a MAC only the one with
    the highest id is kept, so each device appears exactly once.
    """
    latest = (
        db.query(
            SensorReading.mac_address.label("mac_address"),
            func.max(SensorReading.timestamp).label("timestamp"),
        )
        .group_by(SensorReading.mac_address)
        .subquery("latest")
    )

    reading = (
        db.query(SensorReading)
        .join(
            latest,
            and_(
                SensorReading.mac_address == latest.c.mac_address,
                SensorReading.timestamp == latest.c.timestamp,
            ),
        )
        .subquery("reading")
    )

    rows = (
        db.query(
            Device.id,
            Device.device_name,
            Device.mac_address,
            reading.c.id.label("reading_id"),
            *[reading.c[name] for name in READING_FIELDS],
        )
        .outerjoin(reading, Device.mac_address == reading.c.mac_address)
        .filter(Device.user_id == user_id)
        .order_by(Device.id, reading.c.id.desc())
        .all()
    )

    devices = []
    seen = set()
    for row in rows:
        if row.id in seen:
            continue
        seen.add(row.id)
        item = row._asdict()
        item.pop("reading_id")
        devices.append(item)
    return devices


def mac_has_readings(db: Session, mac_address: str) -> bool:
    count = db.query(func.count(SensorReading.id))\
        .filter(SensorReading.mac_address == mac_address)\
        .scalar()
    return bool(count)
