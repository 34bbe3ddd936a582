"""Vote domain service.

Users rate each other up or down. A target's ledger keeps at most one
record per voter; voting again in the same direction is rejected, voting
in the opposite direction cancels the earlier vote. The target's rating
always equals the sum of the signs in its ledger.
"""

from datetime import datetime, timedelta

import logfire

from peerrate.config import VotingSettings
from peerrate.domain.error import (
    DuplicateVoteError,
    PersistenceError,
    RateLimitedError,
    SelfVoteError,
    SenderNotFoundError,
    TargetNotFoundError,
)
from peerrate.domain.model import User, VoteRecord
from peerrate.domain.repository import UserRepository
from peerrate.domain.value import Nickname, VoteDirection
from peerrate.util.clock import Clock, utc_now

from .base import Service
from .ledger_codec import decode_ledger, encode_ledger


def apply_vote(
    target: User, voter: Nickname, direction: VoteDirection, now: datetime
) -> User:
    """Compute the target's state after one vote.

    An existing record with the opposite sign is removed (toggle); with no
    record a new one is appended. Either way the rating moves by
    ``direction`` exactly once.

    Args:
        target: Target user as loaded
        voter: Acting user
        direction: Requested vote
        now: Timestamp for a new record

    Returns:
        Copy of ``target`` with new rating and encoded ledger

    Raises:
        CorruptLedgerError: If the stored ledger cannot be decoded
        DuplicateVoteError: If the voter already cast this vote
        LedgerEncodingError: If the new ledger cannot be encoded
    """
    ledger = decode_ledger(target.rating_list)

    existing = next(
        (index for index, record in enumerate(ledger) if record.voter == voter), None
    )
    if existing is not None:
        if ledger[existing].sign == direction:
            raise DuplicateVoteError()
        del ledger[existing]
    else:
        ledger.append(VoteRecord(voter=voter, sign=direction, cast_at=now))

    return target.model_copy(
        update={
            "rating": target.rating + direction.value,
            "rating_list": encode_ledger(ledger),
        }
    )


class VoteService(Service):
    """Domain service for reputation votes."""

    def __init__(
        self,
        user_repository: UserRepository,
        voting_settings: VotingSettings,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize vote service.

        Args:
            user_repository: User repository
            voting_settings: Cooldown and retry settings
            clock: Source of the current time
        """
        self.user_repository = user_repository
        self.voting_settings = voting_settings
        self.clock = clock

    @property
    def cooldown(self) -> timedelta:
        return timedelta(seconds=self.voting_settings.cooldown_seconds)

    async def cast_vote(
        self, voter: Nickname, target: str, direction: VoteDirection
    ) -> int:
        """Cast a vote from ``voter`` on ``target``.

        Checks run in a fixed order: sender exists, sender is out of the
        cooldown window, target exists, target is not the sender, ledger
        decodes, vote is not a repeat. The target row is written first
        with a version check, then the sender's vote time in a separate
        write.

        Args:
            voter: Acting user's nickname
            target: Nickname of the user being rated, as received
            direction: Up or down

        Returns:
            The target's rating after the vote

        Raises:
            SenderNotFoundError: If the voter does not exist
            RateLimitedError: If the voter voted within the cooldown
            TargetNotFoundError: If the target does not exist or is not a
                valid nickname
            SelfVoteError: If voter and target are the same user
            CorruptLedgerError: If the target's ledger is unreadable
            DuplicateVoteError: If the vote repeats the voter's standing vote
            PersistenceError: If a write fails or keeps losing to
                concurrent writers
        """
        with logfire.span(
            "vote_service.cast_vote",
            voter=voter.root,
            target=target,
            direction=direction.name,
        ):
            sender = await self.user_repository.find_by_nickname(voter)
            if sender is None:
                logfire.warn("Vote from unknown sender", voter=voter.root)
                raise SenderNotFoundError(voter.root)

            now = self.clock()
            if sender.voted_at is not None and now - sender.voted_at < self.cooldown:
                logfire.info(
                    "Vote rate limited",
                    voter=voter.root,
                    last_vote=sender.voted_at.isoformat(),
                )
                raise RateLimitedError(self.voting_settings.cooldown_seconds)

            updated = await self._write_target(sender, target, direction, now)

            try:
                await self.user_repository.update_voted_at(voter, now)
            except PersistenceError as e:
                # The target row is already committed; nothing rolls it back
                logfire.error(
                    "Vote stored but sender vote time not saved",
                    voter=voter.root,
                    target=target,
                    error=str(e),
                )
                raise

            logfire.info(
                "Vote cast",
                voter=voter.root,
                target=target,
                direction=direction.name,
                rating=updated.rating,
            )
            return updated.rating

    async def _write_target(
        self, sender: User, target: str, direction: VoteDirection, now: datetime
    ) -> User:
        """Load, mutate and conditionally store the target.

        Retried from a fresh read whenever another writer bumped the
        target's version in between.
        """
        try:
            nickname = Nickname(target)
        except ValueError:
            logfire.warn("Vote on invalid nickname", target=target)
            raise TargetNotFoundError(target) from None

        max_attempts = self.voting_settings.max_attempts
        for attempt in range(1, max_attempts + 1):
            current = await self.user_repository.find_by_nickname(nickname)
            if current is None:
                logfire.warn("Vote on unknown user", target=target)
                raise TargetNotFoundError(target)

            if current.nickname == sender.nickname:
                logfire.warn("Self vote attempt", voter=sender.nickname.root)
                raise SelfVoteError()

            updated = apply_vote(current, sender.nickname, direction, now)

            if await self.user_repository.update_rating(
                updated, expected_version=current.version
            ):
                return updated

            logfire.warn(
                "Concurrent ledger update, retrying",
                target=target,
                attempt=attempt,
            )

        raise PersistenceError(
            f"can't update user: {target} changed concurrently "
            f"{max_attempts} times"
        )
