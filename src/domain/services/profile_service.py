"""Profile service layer with business logic."""

import re
from typing import Callable, Optional

import structlog

from core.exceptions import (
    AppException,
    DuplicateUserError,
    ProfileDeleteError,
    ProfileNotFoundError,
    ProfileReadError,
    ProfileSaveError,
)
from domain.entities.profile import UserProfile
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()

# Leading base-10 digits after optional whitespace and sign; the rest is ignored.
_ID_PATTERN = re.compile(r"\s*([+-]?[0-9]+)")


def parse_profile_id(raw_id: str) -> int:
    """Read the integer prefix of a path segment, e.g. ``"5abc"`` -> 5."""
    match = _ID_PATTERN.match(raw_id)
    if not match:
        raise ValueError(f"Invalid profile id: {raw_id!r}")
    return int(match.group(1))


class ProfileService:
    """Service layer for UserProfile business logic.

    Store failures never leave this class as raw exceptions: each operation
    translates them into an ``AppException`` that the HTTP layer renders.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_latest(self) -> Optional[UserProfile]:
        """Get the most recently created profile, or None if there is none."""
        try:
            async with self._uow_factory() as uow:
                return await uow.profiles.get_latest()
        except Exception as e:
            logger.error("profile_read_failed", error=str(e), exc_info=True)
            raise ProfileReadError() from e

    async def upsert(
        self,
        id: Optional[int],
        username: Optional[str] = None,
        email: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> UserProfile:
        """Update the profile ``id`` when it is positive, otherwise create one.

        An update only writes the fields that were given. Creation is rejected
        when another profile already uses the email or phone; a missing field
        makes the insert fail in the store. The check and the insert are
        separate statements, so two concurrent creates with the same email can
        both succeed.
        """
        try:
            async with self._uow_factory() as uow:
                if id is not None and id > 0:
                    profile = await uow.profiles.update(
                        id, username=username, email=email, phone=phone
                    )
                else:
                    existing = await uow.profiles.find_by_email_or_phone(email, phone)
                    if existing:
                        raise DuplicateUserError()

                    profile = await uow.profiles.create(
                        username=username, email=email, phone=phone
                    )
                    logger.info("profile_created", profile_id=profile.id)

                await uow.commit()
                return profile
        except AppException:
            raise
        except Exception as e:
            logger.error(
                "profile_save_failed",
                profile_id=id,
                error=str(e),
                exc_info=True,
            )
            raise ProfileSaveError() from e

    async def delete(self, raw_id: str) -> None:
        """Delete the profile whose ID is given as a path segment."""
        try:
            profile_id = parse_profile_id(raw_id)
            async with self._uow_factory() as uow:
                existing = await uow.profiles.get(profile_id)
                if not existing:
                    raise ProfileNotFoundError(profile_id)

                await uow.profiles.delete(profile_id)
                await uow.commit()
                logger.info("profile_deleted", profile_id=profile_id)
        except AppException:
            raise
        except Exception as e:
            logger.error(
                "profile_delete_failed",
                profile_id=raw_id,
                error=str(e),
                exc_info=True,
            )
            raise ProfileDeleteError(raw_id) from e
