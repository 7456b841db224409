from sqlalchemy import Column, String, ForeignKey

from airwatch.core.database import Base, BigIntPK


class Device(Base):
    __tablename__ = "user_devices"

    id = Column(BigIntPK, primary_key=True, autoincrement=True)
    user_id = Column(BigIntPK, ForeignKey("users.id"), nullable=False, index=True)
    device_name = Column(String(100))
    # not unique: two users may register the same MAC
    mac_address = Column(String(17), nullable=False, index=True)
