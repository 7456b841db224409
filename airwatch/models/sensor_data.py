from sqlalchemy import Column, String, Float, DateTime, Index

from airwatch.core.database import Base, BigIntPK


class SensorReading(Base):
    """One row written by the sensor ingestion path; read-only here."""

    __tablename__ = "sensor_data"
    __table_args__ = (
        Index("ix_sensor_data_mac_timestamp", "mac_address", "timestamp"),
    )

    id = Column(BigIntPK, primary_key=True, autoincrement=True)
    mac_address = Column(String(17), nullable=False)
    timestamp = Column(DateTime, nullable=False)

    temperature = Column(Float)
    humidity = Column(Float)
    fahrenheit = Column(Float)
    co2 = Column(Float)
    eco2 = Column(Float)
    tvoc = Column(Float)
    rawh2 = Column(Float)
    rawethanol = Column(Float)
    dust = Column(Float)
