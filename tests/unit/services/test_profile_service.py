"""Unit tests for ProfileService."""

import asyncio
from typing import Any

import pytest

from core.exceptions import (
    DuplicateUserError,
    ProfileDeleteError,
    ProfileNotFoundError,
    ProfileReadError,
    ProfileSaveError,
)
from domain.entities.profile import UserProfile
from domain.services.profile_service import ProfileService, parse_profile_id


@pytest.fixture
def service(uow: Any) -> ProfileService:
    return ProfileService(lambda: uow)


def _profile(id: int = 1, **overrides: str) -> UserProfile:
    fields = {"username": "alice", "email": "alice@example.com", "phone": "555-0100"}
    fields.update(overrides)
    return UserProfile(id=id, **fields)


# --- get_latest ---


class TestGetLatest:
    @pytest.mark.asyncio
    async def test_returns_latest_profile(self, service: ProfileService, uow: Any):
        uow.profiles.get_latest.return_value = _profile(id=7)

        result = await service.get_latest()

        assert result is not None
        assert result.id == 7

    @pytest.mark.asyncio
    async def test_returns_none_when_empty(self, service: ProfileService, uow: Any):
        uow.profiles.get_latest.return_value = None

        assert await service.get_latest() is None

    @pytest.mark.asyncio
    async def test_store_failure_raises_read_error(
        self, service: ProfileService, uow: Any
    ):
        uow.profiles.get_latest.side_effect = ConnectionError("db down")

        with pytest.raises(ProfileReadError) as exc_info:
            await service.get_latest()

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Failed to read profile"


# --- upsert ---


class TestUpsertCreate:
    @pytest.mark.asyncio
    async def test_creates_when_no_id(self, service: ProfileService, uow: Any):
        uow.profiles.find_by_email_or_phone.return_value = None
        uow.profiles.create.return_value = _profile(id=3)

        result = await service.upsert(None, "alice", "alice@example.com", "555-0100")

        assert result.id == 3
        uow.profiles.find_by_email_or_phone.assert_called_once_with(
            "alice@example.com", "555-0100"
        )
        uow.profiles.create.assert_called_once_with(
            username="alice", email="alice@example.com", phone="555-0100"
        )
        uow.profiles.update.assert_not_called()
        assert uow.committed

    @pytest.mark.asyncio
    @pytest.mark.parametrize("id", [0, -5])
    async def test_non_positive_id_creates(
        self, service: ProfileService, uow: Any, id: int
    ):
        uow.profiles.find_by_email_or_phone.return_value = None
        uow.profiles.create.return_value = _profile(id=4)

        await service.upsert(id, "alice", "alice@example.com", "555-0100")

        uow.profiles.create.assert_called_once()
        uow.profiles.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_duplicate_rejected_without_write(
        self, service: ProfileService, uow: Any
    ):
        uow.profiles.find_by_email_or_phone.return_value = _profile(id=1)

        with pytest.raises(DuplicateUserError) as exc_info:
            await service.upsert(None, "bob", "alice@example.com", "555-0199")

        assert exc_info.value.status_code == 400
        uow.profiles.create.assert_not_called()
        assert not uow.committed

    @pytest.mark.asyncio
    async def test_store_failure_raises_save_error(
        self, service: ProfileService, uow: Any
    ):
        uow.profiles.find_by_email_or_phone.return_value = None
        uow.profiles.create.side_effect = RuntimeError("constraint violated")

        with pytest.raises(ProfileSaveError) as exc_info:
            await service.upsert(None, "alice", "alice@example.com", "555-0100")

        assert exc_info.value.status_code == 500
        assert not uow.committed

    @pytest.mark.asyncio
    async def test_missing_field_on_create_raises_save_error(
        self, service: ProfileService, uow: Any
    ):
        uow.profiles.find_by_email_or_phone.return_value = None
        uow.profiles.create.side_effect = RuntimeError("NOT NULL constraint failed")

        with pytest.raises(ProfileSaveError):
            await service.upsert(None, username="alice", email="alice@example.com")

        uow.profiles.create.assert_called_once_with(
            username="alice", email="alice@example.com", phone=None
        )
        assert not uow.committed

    @pytest.mark.asyncio
    async def test_concurrent_creates_both_pass_duplicate_check(
        self, service: ProfileService, uow: Any
    ):
        """The duplicate check and the insert are not atomic.

        Two creates that both run their check before either inserts will both
        succeed. This documents the current behavior; it is not a guarantee.
        """
        uow.profiles.find_by_email_or_phone.return_value = None
        uow.profiles.create.side_effect = [_profile(id=1), _profile(id=2)]

        first, second = await asyncio.gather(
            service.upsert(None, "alice", "alice@example.com", "555-0100"),
            service.upsert(None, "alice", "alice@example.com", "555-0100"),
        )

        assert {first.id, second.id} == {1, 2}
        assert uow.profiles.create.call_count == 2


class TestUpsertUpdate:
    @pytest.mark.asyncio
    async def test_partial_update_passes_only_given_fields(
        self, service: ProfileService, uow: Any
    ):
        uow.profiles.update.return_value = _profile(id=5, username="renamed")

        result = await service.upsert(5, username="renamed")

        assert result.email == "alice@example.com"
        uow.profiles.update.assert_called_once_with(
            5, username="renamed", email=None, phone=None
        )
        assert uow.committed

    @pytest.mark.asyncio
    async def test_updates_when_positive_id(self, service: ProfileService, uow: Any):
        uow.profiles.update.return_value = _profile(id=5, username="renamed")

        result = await service.upsert(5, "renamed", "alice@example.com", "555-0100")

        assert result.id == 5
        assert result.username == "renamed"
        uow.profiles.update.assert_called_once_with(
            5, username="renamed", email="alice@example.com", phone="555-0100"
        )
        uow.profiles.find_by_email_or_phone.assert_not_called()
        uow.profiles.create.assert_not_called()
        assert uow.committed

    @pytest.mark.asyncio
    async def test_update_skips_duplicate_check(
        self, service: ProfileService, uow: Any
    ):
        uow.profiles.find_by_email_or_phone.return_value = _profile(id=9)
        uow.profiles.update.return_value = _profile(id=5)

        await service.upsert(5, "alice", "alice@example.com", "555-0100")

        uow.profiles.find_by_email_or_phone.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_record_raises_save_error(
        self, service: ProfileService, uow: Any
    ):
        uow.profiles.update.side_effect = ValueError("Profile 404 not found")

        with pytest.raises(ProfileSaveError):
            await service.upsert(404, "alice", "alice@example.com", "555-0100")

        uow.profiles.create.assert_not_called()
        assert not uow.committed


# --- delete ---


class TestDelete:
    @pytest.mark.asyncio
    async def test_deletes_existing(self, service: ProfileService, uow: Any):
        uow.profiles.get.return_value = _profile(id=2)
        uow.profiles.delete.return_value = True

        await service.delete("2")

        uow.profiles.get.assert_called_once_with(2)
        uow.profiles.delete.assert_called_once_with(2)
        assert uow.committed

    @pytest.mark.asyncio
    async def test_raises_not_found(self, service: ProfileService, uow: Any):
        uow.profiles.get.return_value = None

        with pytest.raises(ProfileNotFoundError) as exc_info:
            await service.delete("99")

        assert exc_info.value.status_code == 404
        assert exc_info.value.details == {"profile_id": 99}
        uow.profiles.delete.assert_not_called()
        assert not uow.committed

    @pytest.mark.asyncio
    async def test_non_integer_id_raises_delete_error(
        self, service: ProfileService, uow: Any
    ):
        with pytest.raises(ProfileDeleteError) as exc_info:
            await service.delete("abc")

        assert exc_info.value.message == "Failed to delete profile id=abc"
        uow.profiles.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_store_failure_includes_id(self, service: ProfileService, uow: Any):
        uow.profiles.get.return_value = _profile(id=8)
        uow.profiles.delete.side_effect = RuntimeError("lock timeout")

        with pytest.raises(ProfileDeleteError) as exc_info:
            await service.delete("8")

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Failed to delete profile id=8"
        assert not uow.committed

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "raw_id, expected",
        [("1_0", 1), ("5abc", 5), (" 7", 7), ("+3", 3)],
    )
    async def test_reads_leading_digits_only(
        self, service: ProfileService, uow: Any, raw_id: str, expected: int
    ):
        uow.profiles.get.return_value = _profile(id=expected)

        await service.delete(raw_id)

        uow.profiles.get.assert_called_once_with(expected)
        uow.profiles.delete.assert_called_once_with(expected)


class TestParseProfileId:
    @pytest.mark.parametrize(
        "raw_id, expected",
        [("42", 42), ("1_0", 1), ("12abc", 12), ("  9", 9), ("-4", -4), ("007", 7)],
    )
    def test_parses_integer_prefix(self, raw_id: str, expected: int):
        assert parse_profile_id(raw_id) == expected

    @pytest.mark.parametrize("raw_id", ["", "abc", "_1", "٣", "x5"])
    def test_rejects_without_ascii_digit_prefix(self, raw_id: str):
        with pytest.raises(ValueError):
            parse_profile_id(raw_id)
