from __future__ import annotations

from typing import Optional, Protocol

from .model import CentralOfficeCredential, TeacherCredential


class TeacherCredentialRepository(Protocol):
    """Credential table for the teacher role.

    Note (DIP): AuthService depends on this interface, not on a concrete DB.
    """

    def get_by_username(self, username: str) -> Optional[TeacherCredential]:
        raise NotImplementedError


class CentralOfficeCredentialRepository(Protocol):
    def get_by_username(self, username: str) -> Optional[CentralOfficeCredential]:
        raise NotImplementedError
