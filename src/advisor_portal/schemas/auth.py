"""Authentication schemas."""

from typing import Optional

from pydantic import BaseModel, EmailStr, Field, model_validator


class LoginRequest(BaseModel):
    """Local login. The account is identified by username or email."""
    username: Optional[str] = None
    email: Optional[str] = None
    password: str = Field(..., min_length=1)

    @model_validator(mode="after")
    def require_identifier(self):
        if not (self.username or self.email):
            raise ValueError("Username or email is required")
        return self


class RegisterRequest(BaseModel):
    """Local account registration."""
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=8, max_length=128)
    name: str = Field(..., min_length=1, max_length=100)
    mobile_number: str = ""
    email: Optional[EmailStr] = None
    salutation: Optional[str] = None
    age_group: Optional[str] = None


class PrincipalResponse(BaseModel):
    """The authenticated advisor as returned to the client."""
    id: int
    username: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None


class ProxyLoginRequest(BaseModel):
    """Login forwarded to the remote backend."""
    email: EmailStr
    password: str = Field(..., min_length=1)


class ProxyLoginResponse(BaseModel):
    """Result of a remote login. Tokens stay in the server-side session."""
    message: str = "Login successful"
    advisor: dict
