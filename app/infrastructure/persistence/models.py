"""SQLAlchemy models for the shop catalog tables."""
import uuid

from sqlalchemy import Column, DateTime, Float, String, Uuid

from app.constants import (
    ENUM_COLUMN_LENGTH,
    PASSWORD_HASH_MAX_LENGTH,
    PHONE_NUMBER_MAX_LENGTH,
    SHOP_ADDRESS_MAX_LENGTH,
    SHOP_NAME_MAX_LENGTH,
    USERNAME_MAX_LENGTH,
    WORKING_HOURS_MAX_LENGTH,
)
from app.infrastructure.persistence.db import Base


class AlcoholShop(Base):
    __tablename__ = "alcohol_shops"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(SHOP_NAME_MAX_LENGTH), nullable=False, index=True)
    address = Column(String(SHOP_ADDRESS_MAX_LENGTH), nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    phone_number = Column(String(PHONE_NUMBER_MAX_LENGTH))
    working_hours = Column(String(WORKING_HOURS_MAX_LENGTH))
    shop_type = Column(String(ENUM_COLUMN_LENGTH), index=True)
    created_at = Column(DateTime(timezone=True), nullable=False)


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    username = Column(String(USERNAME_MAX_LENGTH), unique=True, nullable=False, index=True)
    password = Column(String(PASSWORD_HASH_MAX_LENGTH), nullable=False)
    role = Column(String(ENUM_COLUMN_LENGTH), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
