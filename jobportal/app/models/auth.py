"""Authentication models."""
from typing import Any, Dict, Optional
from pydantic import BaseModel


class Credentials(BaseModel):
    email: str
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    refresh_token: Optional[str] = None
    expires_in: Optional[int] = None
    user: Optional[Dict[str, Any]] = None


class SessionUser(BaseModel):
    id: str
    email: Optional[str] = None


class SessionInfo(BaseModel):
    authenticated: bool
    user: Optional[SessionUser] = None
