"""User profile domain entity."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class UserProfile:
    """Domain entity for a user profile.

    ``id`` is assigned by the store on creation and stays ``None`` until then.
    """

    username: str
    email: str
    phone: str
    id: Optional[int] = None
