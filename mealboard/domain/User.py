"""User account and signed-in session."""
from datetime import datetime


class User:
    def __init__(self, id: str, email: str):
        self.id = id
        self.email = email

    def __str__(self) -> str:
        return f"User {self.email} ({self.id})"

    __repr__ = __str__

    def to_dict(self):
        return {"id": self.id, "email": self.email}


class Session:
    def __init__(self, token: str, user: User, created_at: datetime):
        self.token = token
        self.user = user
        self.created_at = created_at

    def to_dict(self):
        return {
            "token": self.token,
            "user": self.user.to_dict(),
            "created_at": self.created_at.isoformat(),
        }
