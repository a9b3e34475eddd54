"""SQLAlchemy implementation of UserProfile repository."""

from typing import Optional

from sqlalchemy import ColumnElement, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.profile import UserProfile
from infrastructure.database.models import UserProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: int) -> UserProfile | None:
        """Get a profile by ID."""
        model = await self._session.get(UserProfileModel, id)
        return self._to_entity(model) if model else None

    async def get_latest(self) -> UserProfile | None:
        """Get the profile with the highest ID."""
        stmt = select(UserProfileModel).order_by(UserProfileModel.id.desc()).limit(1)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def find_by_email_or_phone(
        self, email: Optional[str], phone: Optional[str]
    ) -> UserProfile | None:
        """Get the first profile whose email or phone matches a given value."""
        conditions: list[ColumnElement[bool]] = []
        if email is not None:
            conditions.append(UserProfileModel.email == email)
        if phone is not None:
            conditions.append(UserProfileModel.phone == phone)
        if not conditions:
            return None

        stmt = (
            select(UserProfileModel)
            .where(or_(*conditions))
            .order_by(UserProfileModel.id)
            .limit(1)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def create(
        self,
        *,
        username: Optional[str],
        email: Optional[str],
        phone: Optional[str],
    ) -> UserProfile:
        """Create a new profile; a missing field fails the NOT NULL constraint."""
        model = UserProfileModel(username=username, email=email, phone=phone)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(
        self,
        id: int,
        *,
        username: Optional[str] = None,
        email: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> UserProfile:
        """Update the given fields of an existing profile."""
        model = await self._session.get(UserProfileModel, id)

        if not model:
            raise ValueError(f"Profile {id} not found")

        if username is not None:
            model.username = username
        if email is not None:
            model.email = email
        if phone is not None:
            model.phone = phone

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: int) -> bool:
        """Delete a profile."""
        model = await self._session.get(UserProfileModel, id)

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    def _to_entity(self, model: UserProfileModel) -> UserProfile:
        """Convert ORM model to domain entity."""
        return UserProfile(
            id=model.id,
            username=model.username,
            email=model.email,
            phone=model.phone,
        )
