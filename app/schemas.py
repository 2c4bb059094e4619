"""
Request/response bodies for the JSON routes.
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

# bcrypt rejects passwords longer than 72 bytes
PASSWORD_MAX_BYTES = 72


def _check_password_bytes(value: str) -> str:
    if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValueError(f"Password must be at most {PASSWORD_MAX_BYTES} bytes")
    return value


class RegisterData(BaseModel):
    username: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return _check_password_bytes(value)


class LoginData(BaseModel):
    email: EmailStr
    password: str


class ForgotPasswordData(BaseModel):
    email: EmailStr


class ResetPasswordData(BaseModel):
    password: str = Field(..., min_length=1)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return _check_password_bytes(value)


class MessageResponse(BaseModel):
    message: str


class LoginResponse(BaseModel):
    message: str
    token: str


class BookingCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    email: EmailStr
    mobileNo: str
    pickupAdd: str
    dropAdd: str
    carType: str
    tripType: str
    from_: str = Field(..., alias="from")
    to: str
    distance: Optional[float] = None
    fare: Optional[float] = None
    dateOfBooking: Optional[datetime] = None
    bookingStatus: Optional[str] = None

    def to_store(self) -> dict:
        data = self.model_dump(by_alias=True)
        if self.dateOfBooking is not None:
            data["dateOfBooking"] = self.dateOfBooking.isoformat()
        return data


class BookingStatusUpdate(BaseModel):
    bookingStatus: Optional[str] = None
