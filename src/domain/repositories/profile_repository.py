"""User profile repository protocol."""

from typing import Optional, Protocol

from domain.entities.profile import UserProfile


class IProfileRepository(Protocol):
    """Repository interface for UserProfile entities."""

    async def get(self, id: int) -> UserProfile | None:
        """Get a profile by ID."""
        ...

    async def get_latest(self) -> UserProfile | None:
        """Get the profile with the highest ID."""
        ...

    async def find_by_email_or_phone(
        self, email: Optional[str], phone: Optional[str]
    ) -> UserProfile | None:
        """Get any profile whose email or phone matches a given value."""
        ...

    async def create(
        self,
        *,
        username: Optional[str],
        email: Optional[str],
        phone: Optional[str],
    ) -> UserProfile:
        """Create a new profile; the store assigns its ID and rejects missing fields."""
        ...

    async def update(
        self,
        id: int,
        *,
        username: Optional[str] = None,
        email: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> UserProfile:
        """Overwrite the given fields of an existing profile; None leaves a field as is."""
        ...

    async def delete(self, id: int) -> bool:
        """Delete a profile and return success status."""
        ...
