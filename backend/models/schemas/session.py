"""Explicit session value: who is signed in and with which token."""

from pydantic import BaseModel


class User(BaseModel):
    name: str = ""
    email: str
    picture: str | None = None


class SessionState(BaseModel):
    current_user: User | None = None
    auth_token: str | None = None

    model_config = {"frozen": True}

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None and bool(self.auth_token)
