"""
Pydantic schemas for registration, login and user records.
"""
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field, field_validator

from app.db.models.user import UserRole
from app.schemas.common import blank_to_none


class RegisterRequest(BaseModel):
    """Request schema for user registration."""
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., min_length=8, description="User's password (min 8 characters)")
    role: UserRole = Field(..., description="job_seeker, company or administrator")
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    phone: Optional[str] = Field(default=None, description="Phone number (optional)")
    
    @field_validator("password")
    @classmethod
    def validate_password_length(cls, v: str) -> str:
        """Validate password length in bytes (bcrypt limit is 72 bytes)."""
        if len(v.encode("utf-8")) > 72:
            raise ValueError("Password too long (bcrypt limit 72 bytes)")
        return v
    
    @field_validator("phone", mode="before")
    @classmethod
    def normalize_phone(cls, v):
        return blank_to_none(v)
    
    class Config:
        json_schema_extra = {
            "example": {
                "email": "jane.doe@example.com",
                "password": "SecurePass123",
                "role": "job_seeker",
                "first_name": "Jane",
                "last_name": "Doe",
                "phone": "+1234567890"
            }
        }


class LoginRequest(BaseModel):
    """Request schema for user login."""
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., min_length=1, description="User's password")
    
    class Config:
        json_schema_extra = {
            "example": {
                "email": "jane.doe@example.com",
                "password": "SecurePass123"
            }
        }


class UserResponse(BaseModel):
    """User record as exposed over HTTP. The password hash is never serialized."""
    id: int
    email: str
    role: UserRole
    first_name: str
    last_name: str
    phone: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True
