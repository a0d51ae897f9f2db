"""Admin domain schemas - Pydantic models for validation"""

from pydantic import BaseModel, field_validator

from ...shared.validators import validate_email, validate_required_text


class AdminCreate(BaseModel):
    """Schema for registering a dashboard admin"""

    email: str
    password: str
    name: str
    role: str = "admin"

    @field_validator("email")
    @classmethod
    def check_email(cls, v):
        v = validate_email(v)
        if not v:
            raise ValueError("Email is required")
        return v

    @field_validator("name", "role")
    @classmethod
    def check_text(cls, v):
        return validate_required_text(v)

    @field_validator("password")
    @classmethod
    def check_password(cls, v):
        if len(v) < 6:
            raise ValueError("Password must be at least 6 characters long")
        return v


class AdminLogin(BaseModel):
    email: str
    password: str


class AdminResponse(BaseModel):
    """Public admin view - the password hash never leaves the service"""

    id: int
    email: str
    name: str
