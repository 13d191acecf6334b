"""User request bodies."""

from typing import Literal, Optional

from pydantic import Field

from . import Payload

Role = Literal["customer", "admin"]


class RegisterRequest(Payload):
    name: str = Field(..., max_length=120)
    email: str = Field(..., max_length=255)
    password: str = Field(..., min_length=1)
    phone: Optional[str] = Field(None, max_length=32)
    address: Optional[str] = Field(None, max_length=255)
    role: Role = "customer"


class LoginRequest(Payload):
    email: str
    password: str


class VerifyRequest(Payload):
    email: str
    code: str


class ResendCodeRequest(Payload):
    email: str


class UserUpdateRequest(Payload):
    name: Optional[str] = Field(None, max_length=120)
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=32)
    address: Optional[str] = Field(None, max_length=255)
    password: Optional[str] = Field(None, min_length=1)
    role: Optional[Role] = None
