"""User record, owned by the identity collaborator.

The fulfillment core only consumes a user's id and its display
projection (id, name, email).
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from orderflow.domain.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass
class User:

    id: int | None
    name: str
    email: str

    @staticmethod
    def create(name: str, email: str) -> User:
        if not name or not name.strip():
            raise ValidationError("User name is required")
        if not email or not _EMAIL_RE.match(email.strip()):
            raise ValidationError(f"Invalid email address: {email!r}")
        return User(id=None, name=name.strip(), email=email.strip().lower())
