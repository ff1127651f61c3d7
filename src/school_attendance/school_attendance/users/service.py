from __future__ import annotations

from typing import Callable, Optional, Union

from werkzeug.security import check_password_hash

from ..common.validators import require_non_empty
from ..core.constants import AUTH_FAILURE_MESSAGE
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from .model import CentralOfficeCredential, Identity, TeacherCredential
from .repository import CentralOfficeCredentialRepository, TeacherCredentialRepository

Credential = Union[TeacherCredential, CentralOfficeCredential]


def normalize_username(username: str) -> str:
    """Usernames are trimmed and matched case-insensitively."""
    return require_non_empty(username, "username").lower()


def parse_role(value) -> Role:
    if isinstance(value, Role):
        return value
    try:
        return Role(str(value or "").strip())
    except ValueError:
        raise ValidationError("Invalid role")


class AuthService:
    """Use case: verify (username, password, role) and return an Identity."""

    def __init__(self, teachers: TeacherCredentialRepository, central_office: CentralOfficeCredentialRepository):
        self._lookups: dict[Role, Callable[[str], Optional[Credential]]] = {
            Role.TEACHER: teachers.get_by_username,
            Role.CENTRAL_OFFICE: central_office.get_by_username,
        }
        self._identities: dict[Role, Callable[[Credential], Identity]] = {
            Role.TEACHER: self._teacher_identity,
            Role.CENTRAL_OFFICE: self._central_office_identity,
        }
        if set(self._lookups) != set(Role) or set(self._identities) != set(Role):
            raise RuntimeError("AuthService must handle every Role")

    def authenticate(self, username: str, password: str, role: Union[Role, str]) -> Identity:
        role = parse_role(role)
        if not isinstance(username, str) or not isinstance(password, str):
            raise ValidationError("username and password must be text")
        username = normalize_username(username)
        if not password:
            raise ValidationError("password is required")

        credential = self._lookups[role](username)
        if not credential:
            raise AuthenticationError(AUTH_FAILURE_MESSAGE)

        try:
            ok = check_password_hash(credential.password_hash, password)
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError(AUTH_FAILURE_MESSAGE)

        return self._identities[role](credential)

    @staticmethod
    def _teacher_identity(credential: TeacherCredential) -> Identity:
        return Identity(
            id=credential.id,
            username=credential.username,
            role=Role.TEACHER,
            school_id=credential.school_id,
            full_name=credential.full_name,
        )

    @staticmethod
    def _central_office_identity(credential: CentralOfficeCredential) -> Identity:
        return Identity(id=credential.id, username=credential.username, role=Role.CENTRAL_OFFICE)
