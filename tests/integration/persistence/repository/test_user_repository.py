"""Integration tests for UserRepository.

These tests run against a real Postgres with migrations applied and
check the version-guarded rating write.
"""

from uuid import uuid4

import pytest

from peerrate.domain.repository import UserRepository
from tests.conftest import T0, make_user
from tests.harness import create_env_fixture

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def unique_nickname() -> str:
    return f"it{uuid4().hex[:12]}"


class TestUserRepositoryIntegration:
    """Integration tests for PostgresUserRepository."""

    @pytest.mark.asyncio
    async def test_update_rating_bumps_version(self, integration_env):
        """A write at the stored version succeeds and increments it."""
        # Arrange
        repo = await integration_env.get(UserRepository)
        user = await repo.add(make_user(unique_nickname()))

        # Act
        written = await repo.update_rating(
            user.model_copy(update={"rating": 1}), expected_version=0
        )

        # Assert
        assert written is True
        stored = await repo.find_by_nickname(user.nickname)
        assert stored.rating == 1
        assert stored.version == 1

    @pytest.mark.asyncio
    async def test_update_rating_with_stale_version_writes_nothing(
        self, integration_env
    ):
        """A writer that read an older version loses and leaves the row alone."""
        # Arrange
        repo = await integration_env.get(UserRepository)
        user = await repo.add(make_user(unique_nickname()))
        assert await repo.update_rating(
            user.model_copy(update={"rating": 1}), expected_version=0
        )

        # Act
        written = await repo.update_rating(
            user.model_copy(update={"rating": -1}), expected_version=0
        )

        # Assert
        assert written is False
        stored = await repo.find_by_nickname(user.nickname)
        assert stored.rating == 1
        assert stored.version == 1

    @pytest.mark.asyncio
    async def test_update_rating_skips_deleted_user(self, integration_env):
        """Soft-deleted rows never match the rating write."""
        # Arrange
        repo = await integration_env.get(UserRepository)
        user = await repo.add(make_user(unique_nickname()))
        assert await repo.soft_delete(user.nickname, T0)

        # Act
        written = await repo.update_rating(
            user.model_copy(update={"rating": 1}), expected_version=0
        )

        # Assert
        assert written is False
