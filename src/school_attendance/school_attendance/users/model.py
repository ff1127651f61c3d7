from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class TeacherCredential:
    """A teacher login row. Each teacher belongs to exactly one school."""

    id: int
    username: str
    password_hash: str
    school_id: str
    full_name: Optional[str] = None


@dataclass(frozen=True)
class CentralOfficeCredential:
    """A central office login row (no school affiliation)."""

    id: int
    username: str
    password_hash: str


@dataclass(frozen=True)
class Identity:
    """Verified user returned by AuthService. Holds no secret material."""

    id: int
    username: str
    role: Role
    school_id: Optional[str] = None
    full_name: Optional[str] = None

    def to_dict(self) -> dict:
        out = {"id": self.id, "username": self.username, "role": self.role.value}
        if self.role == Role.TEACHER:
            out["school_id"] = self.school_id
            out["full_name"] = self.full_name
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "Identity":
        return cls(
            id=int(data["id"]),
            username=str(data["username"]),
            role=Role(data["role"]),
            school_id=data.get("school_id"),
            full_name=data.get("full_name"),
        )
