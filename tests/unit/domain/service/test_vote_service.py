"""Unit tests for VoteService."""

from datetime import timedelta

import pytest
import pytest_asyncio

from peerrate.config import VotingSettings
from peerrate.domain.error import (
    CorruptLedgerError,
    DuplicateVoteError,
    PersistenceError,
    RateLimitedError,
    SelfVoteError,
    SenderNotFoundError,
    TargetNotFoundError,
    VotingError,
)
from peerrate.domain.service import VoteService, apply_vote, decode_ledger
from peerrate.domain.value import Nickname, VoteDirection
from peerrate.persistence.repository.inmemory import InMemoryUserRepository
from tests.conftest import T0, FakeClock, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()

UP = VoteDirection.UP
DOWN = VoteDirection.DOWN


def nick(value: str) -> Nickname:
    return Nickname(value)


async def ledger_sum(repo, nickname: str) -> int:
    user = await repo.find_by_nickname(nick(nickname))
    return sum(record.sign.value for record in decode_ledger(user.rating_list))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def repo():
    return InMemoryUserRepository()


@pytest.fixture
def service(repo, clock):
    return VoteService(
        user_repository=repo,
        voting_settings=VotingSettings(cooldown_seconds=3600, max_attempts=3),
        clock=clock,
    )


@pytest_asyncio.fixture
async def people(repo):
    for name in ("alice", "bob", "carol", "dave"):
        await repo.add(make_user(name))


class TestApplyVote:
    """Tests for the pure vote transition."""

    def test_first_vote_appends_record(self):
        """A first vote adds one record and moves the rating by one."""
        target = make_user("carol")

        updated = apply_vote(target, nick("alice"), UP, T0)

        ledger = decode_ledger(updated.rating_list)
        assert updated.rating == 1
        assert [(r.voter.root, r.sign) for r in ledger] == [("alice", UP)]
        assert ledger[0].cast_at == T0

    def test_opposite_vote_removes_record(self):
        """Voting the other way cancels the standing vote."""
        target = apply_vote(make_user("carol"), nick("alice"), UP, T0)

        updated = apply_vote(target, nick("alice"), DOWN, T0 + timedelta(hours=2))

        assert updated.rating == 0
        assert decode_ledger(updated.rating_list) == []

    def test_repeat_vote_is_rejected(self):
        """The same voter cannot cast the same vote twice."""
        target = apply_vote(make_user("carol"), nick("alice"), DOWN, T0)

        with pytest.raises(DuplicateVoteError):
            apply_vote(target, nick("alice"), DOWN, T0)

    def test_input_user_is_not_mutated(self):
        """apply_vote returns a copy."""
        target = make_user("carol")

        apply_vote(target, nick("alice"), UP, T0)

        assert target.rating == 0
        assert target.rating_list == ""

    def test_corrupt_ledger_is_rejected(self):
        """An unreadable ledger stops the vote."""
        target = make_user("carol", rating_list="{not json")

        with pytest.raises(CorruptLedgerError):
            apply_vote(target, nick("alice"), UP, T0)


class TestCastVote:
    """Tests for cast_vote."""

    @pytest.mark.asyncio
    async def test_up_vote_increments_rating(self, service, repo, people):
        """An up vote on a fresh target gives rating 1."""
        rating = await service.cast_vote(nick("alice"), "carol", UP)

        assert rating == 1
        carol = await repo.find_by_nickname(nick("carol"))
        assert carol.rating == 1
        assert carol.version == 1

    @pytest.mark.asyncio
    async def test_vote_records_sender_vote_time(self, service, repo, people, clock):
        """The sender's last vote time is the time of the vote."""
        await service.cast_vote(nick("alice"), "carol", DOWN)

        alice = await repo.find_by_nickname(nick("alice"))
        assert alice.voted_at == clock.now

    @pytest.mark.asyncio
    async def test_toggle_restores_previous_rating(self, service, repo, people, clock):
        """Voting up then down returns the target to its starting rating."""
        await service.cast_vote(nick("alice"), "carol", UP)
        clock.advance(hours=1, seconds=1)

        rating = await service.cast_vote(nick("alice"), "carol", DOWN)

        assert rating == 0
        carol = await repo.find_by_nickname(nick("carol"))
        assert carol.rating_list == "[]"

    @pytest.mark.asyncio
    async def test_duplicate_vote_leaves_state_untouched(
        self, service, repo, people, clock
    ):
        """A repeated vote is rejected and nothing is written."""
        await service.cast_vote(nick("alice"), "carol", UP)
        clock.advance(hours=2)
        before = await repo.find_by_nickname(nick("carol"))
        alice_before = await repo.find_by_nickname(nick("alice"))

        with pytest.raises(DuplicateVoteError):
            await service.cast_vote(nick("alice"), "carol", UP)

        assert await repo.find_by_nickname(nick("carol")) == before
        alice = await repo.find_by_nickname(nick("alice"))
        assert alice.voted_at == alice_before.voted_at

    @pytest.mark.asyncio
    async def test_self_vote_is_rejected(self, service, people):
        """Nobody can vote for themselves."""
        with pytest.raises(SelfVoteError):
            await service.cast_vote(nick("alice"), "alice", UP)

    @pytest.mark.asyncio
    async def test_unknown_target_is_rejected(self, service, people):
        """Voting on a missing user fails with a voting error."""
        with pytest.raises(TargetNotFoundError, match="user not found: zed"):
            await service.cast_vote(nick("alice"), "zed", UP)

    @pytest.mark.asyncio
    async def test_unknown_sender_is_not_a_voting_error(self, service, people):
        """A missing sender raises SenderNotFoundError, outside VotingError."""
        with pytest.raises(SenderNotFoundError) as excinfo:
            await service.cast_vote(nick("ghost"), "alice", UP)

        assert not isinstance(excinfo.value, VotingError)

    @pytest.mark.asyncio
    async def test_rate_limit_is_checked_before_target(self, service, repo, clock):
        """A sender in cooldown is rejected even for an unknown target."""
        await repo.add(make_user("alice", voted_at=clock.now - timedelta(minutes=5)))

        with pytest.raises(RateLimitedError, match="once per 60 minutes"):
            await service.cast_vote(nick("alice"), "zed", UP)

    @pytest.mark.asyncio
    async def test_overlong_target_is_unknown_target(self, service, repo, people):
        """A target no nickname could match fails like a missing user."""
        alice_before = await repo.find_by_nickname(nick("alice"))

        with pytest.raises(TargetNotFoundError, match="user not found: x+"):
            await service.cast_vote(nick("alice"), "x" * 300, UP)

        alice = await repo.find_by_nickname(nick("alice"))
        assert alice.voted_at == alice_before.voted_at

    @pytest.mark.asyncio
    async def test_rate_limit_is_checked_before_target_shape(
        self, service, repo, clock
    ):
        """Cooldown wins over an empty target name."""
        await repo.add(make_user("alice", voted_at=clock.now - timedelta(minutes=5)))

        with pytest.raises(RateLimitedError):
            await service.cast_vote(nick("alice"), "", UP)

    @pytest.mark.asyncio
    async def test_cooldown_rejects_then_accepts(self, service, people, clock):
        """A second vote inside the hour fails; after the hour it succeeds."""
        await service.cast_vote(nick("alice"), "carol", UP)

        clock.advance(minutes=59)
        with pytest.raises(RateLimitedError):
            await service.cast_vote(nick("alice"), "bob", UP)

        clock.advance(minutes=1)
        assert await service.cast_vote(nick("alice"), "bob", UP) == 1

    @pytest.mark.asyncio
    async def test_voting_on_deleted_user_is_rejected(self, service, repo, people):
        """Soft-deleted users cannot be rated."""
        await repo.soft_delete(nick("carol"), T0)

        with pytest.raises(TargetNotFoundError):
            await service.cast_vote(nick("alice"), "carol", UP)

    @pytest.mark.asyncio
    async def test_community_scenario(self, service, repo, people, clock):
        """Two up votes, a toggle, then a rate-limited attempt."""
        assert await service.cast_vote(nick("alice"), "dave", UP) == 1
        assert await service.cast_vote(nick("bob"), "dave", UP) == 2

        clock.advance(hours=1, seconds=1)
        assert await service.cast_vote(nick("alice"), "dave", DOWN) == 1

        dave = await repo.find_by_nickname(nick("dave"))
        ledger = decode_ledger(dave.rating_list)
        assert [(r.voter.root, r.sign) for r in ledger] == [("bob", UP)]

        with pytest.raises(RateLimitedError):
            await service.cast_vote(nick("alice"), "bob", UP)

    @pytest.mark.asyncio
    async def test_rating_always_matches_ledger(self, service, repo, people, clock):
        """Rating equals the ledger sum after every accepted or rejected vote."""
        steps = [
            ("alice", "dave", UP),
            ("bob", "dave", DOWN),
            ("carol", "dave", UP),
            ("alice", "dave", UP),
            ("bob", "dave", UP),
            ("alice", "dave", DOWN),
            ("dave", "dave", UP),
            ("carol", "dave", DOWN),
        ]
        for voter, target, direction in steps:
            clock.advance(hours=2)
            try:
                await service.cast_vote(nick(voter), target, direction)
            except VotingError:
                pass
            dave = await repo.find_by_nickname(nick("dave"))
            assert dave.rating == await ledger_sum(repo, "dave")

        dave = await repo.find_by_nickname(nick("dave"))
        assert dave.rating == 0
        assert decode_ledger(dave.rating_list) == []


class ConflictingRepository(InMemoryUserRepository):
    """Loses the first ``conflicts`` conditional writes to a phantom writer."""

    def __init__(self, conflicts: int) -> None:
        super().__init__()
        self.conflicts = conflicts
        self.rating_writes = 0

    async def update_rating(self, user, expected_version):
        self.rating_writes += 1
        if self.conflicts:
            self.conflicts -= 1
            # Another request lands its own vote first
            current = await self.find_by_nickname(user.nickname)
            phantom = Nickname(f"ghost{self.rating_writes}")
            bumped = apply_vote(current, phantom, VoteDirection.UP, T0)
            await super().update_rating(bumped, current.version)
        return await super().update_rating(user, expected_version)


class FailingVoteTimeRepository(InMemoryUserRepository):
    async def update_voted_at(self, nickname, voted_at):
        raise PersistenceError(f"can't update user: {nickname} unavailable")


class TestConcurrentWrites:
    """Tests for the optimistic version check."""

    @pytest.mark.asyncio
    async def test_lost_race_is_retried_without_losing_votes(self, clock):
        """A conflicting write is re-applied on top of the other vote."""
        repo = ConflictingRepository(conflicts=1)
        for name in ("alice", "dave"):
            await repo.add(make_user(name))
        service = VoteService(repo, VotingSettings(), clock=clock)

        rating = await service.cast_vote(nick("alice"), "dave", UP)

        assert rating == 2
        dave = await repo.find_by_nickname(nick("dave"))
        assert sorted(r.voter.root for r in decode_ledger(dave.rating_list)) == [
            "alice",
            "ghost1",
        ]
        assert dave.rating == await ledger_sum(repo, "dave")

    @pytest.mark.asyncio
    async def test_gives_up_after_max_attempts(self, clock):
        """Persistent conflicts end in a PersistenceError."""
        repo = ConflictingRepository(conflicts=10)
        for name in ("alice", "dave"):
            await repo.add(make_user(name))
        service = VoteService(repo, VotingSettings(max_attempts=2), clock=clock)

        with pytest.raises(PersistenceError, match="changed concurrently 2 times"):
            await service.cast_vote(nick("alice"), "dave", UP)

        assert repo.rating_writes == 2
        alice = await repo.find_by_nickname(nick("alice"))
        assert alice.voted_at is None

    @pytest.mark.asyncio
    async def test_failed_vote_time_write_is_reported(self, clock):
        """The target keeps the vote even when the sender write fails."""
        repo = FailingVoteTimeRepository()
        for name in ("alice", "dave"):
            await repo.add(make_user(name))
        service = VoteService(repo, VotingSettings(), clock=clock)

        with pytest.raises(PersistenceError):
            await service.cast_vote(nick("alice"), "dave", UP)

        dave = await repo.find_by_nickname(nick("dave"))
        assert dave.rating == 1


class TestVoteServiceFromContainer:
    """VoteService wired through the DI container."""

    @pytest.mark.asyncio
    async def test_container_service_casts_votes(self, unit_env):
        """The container shares one repository between service and caller."""
        from peerrate.domain.repository import UserRepository

        repo = await unit_env.get(UserRepository)
        service = await unit_env.get(VoteService)
        await repo.add(make_user("alice"))
        await repo.add(make_user("bob"))

        assert await service.cast_vote(nick("alice"), "bob", DOWN) == -1
