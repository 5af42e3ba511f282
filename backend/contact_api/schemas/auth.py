from typing import Optional
from pydantic import BaseModel


class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(BaseModel):
    role: str
