from datetime import datetime
from pydantic import BaseModel
from typing import Optional


class DeviceCreate(BaseModel):
    userEmail: str
    name: str
    mac_address: str


class DeviceDelete(BaseModel):
    userEmail: str
    mac_address: str


class DeviceReading(BaseModel):
    id: int
    device_name: Optional[str] = None
    mac_address: str
    timestamp: Optional[datetime] = None
    temperature: Optional[float] = None
    humidity: Optional[float] = None
    fahrenheit: Optional[float] = None
    co2: Optional[float] = None
    eco2: Optional[float] = None
    tvoc: Optional[float] = None
    rawh2: Optional[float] = None
    rawethanol: Optional[float] = None
    dust: Optional[float] = None


class DeviceExists(BaseModel):
    exists: bool


class DeviceDeleted(BaseModel):
    message: str
    deleted: int
