"""Points economy domain service."""

from dataclasses import dataclass, field

import logfire

from board.config import PointsSettings
from board.domain.error import InsufficientPointsError
from board.domain.model.points import UserPointsTracker
from board.domain.repository import PointsRepository
from board.domain.value import UserId
from board.util.locks import KeyedLock

from .base import Service


@dataclass
class PointsReservation:
    """Points debited up front for an action that may still fail.

    Released (refunded) if the action fails, kept otherwise.
    """

    user_id: UserId
    amount: int
    released: bool = field(default=False)


class PointsService(Service):
    """Domain service for the per-user points ledger.

    Every read-modify-write on a user's tracker holds that user's lock, so
    concurrent calls for the same user can't interleave. Spending goes
    through reserve(): the balance is checked before anything is debited,
    and the debit is refunded with release() if the action doesn't go ahead.
    """

    def __init__(
        self,
        points_repository: PointsRepository,
        points_settings: PointsSettings,
        locks: KeyedLock,
    ) -> None:
        """Initialize points service.

        Args:
            points_repository: Points repository
            points_settings: Economy configuration
            locks: Shared per-entity locks
        """
        self.points_repository = points_repository
        self.settings = points_settings
        self.locks = locks

    async def get_points(self, user_id: UserId) -> UserPointsTracker | None:
        """Get a user's tracker without creating one.

        Args:
            user_id: User ID

        Returns:
            Tracker if the user has interacted before, None otherwise
        """
        return await self.points_repository.find_by_user(user_id)

    async def get_or_create(self, user_id: UserId) -> UserPointsTracker:
        """Get a user's tracker, creating it at the default balance.

        Args:
            user_id: User ID

        Returns:
            Existing or newly created tracker
        """
        async with self.locks.hold(("points", user_id)):
            return await self._get_or_create(user_id)

    async def adjust(
        self, user_id: UserId, earned: int, spent: int
    ) -> UserPointsTracker:
        """Apply earned and spent points to both balances.

        Args:
            user_id: User ID
            earned: Points credited (non-negative)
            spent: Points debited (non-negative)

        Returns:
            Updated tracker

        Raises:
            ValueError: If earned or spent is negative
            InsufficientPointsError: If the remaining balance would go negative
        """
        if earned < 0 or spent < 0:
            raise ValueError("Earned and spent points must be non-negative")

        with logfire.span(
            "points_service.adjust", user_id=user_id, earned=earned, spent=spent
        ):
            async with self.locks.hold(("points", user_id)):
                tracker = await self._get_or_create(user_id)
                delta = earned - spent
                if tracker.remaining_points + delta < 0:
                    logfire.warn(
                        "Points adjustment would overdraw",
                        user_id=user_id,
                        remaining=tracker.remaining_points,
                        delta=delta,
                    )
                    raise InsufficientPointsError(
                        user_id, spent, tracker.remaining_points + earned
                    )

                updated = await self._apply(tracker, delta)
                logfire.info(
                    "Points adjusted",
                    user_id=user_id,
                    total=updated.total_points,
                    remaining=updated.remaining_points,
                )
                return updated

    async def reserve(self, user_id: UserId, amount: int) -> PointsReservation:
        """Debit points for an action, checking the balance first.

        Args:
            user_id: User ID
            amount: Points the action costs (non-negative)

        Returns:
            Reservation to release if the action fails

        Raises:
            ValueError: If amount is negative
            InsufficientPointsError: If the balance is below amount (nothing is debited)
        """
        if amount < 0:
            raise ValueError("Reserved amount must be non-negative")

        with logfire.span("points_service.reserve", user_id=user_id, amount=amount):
            async with self.locks.hold(("points", user_id)):
                tracker = await self._get_or_create(user_id)
                if tracker.remaining_points < amount:
                    logfire.info(
                        "Insufficient points",
                        user_id=user_id,
                        remaining=tracker.remaining_points,
                        required=amount,
                    )
                    raise InsufficientPointsError(
                        user_id, amount, tracker.remaining_points
                    )

                if amount:
                    await self._apply(tracker, -amount)
                logfire.info("Points reserved", user_id=user_id, amount=amount)
                return PointsReservation(user_id=user_id, amount=amount)

    async def release(self, reservation: PointsReservation) -> UserPointsTracker:
        """Refund a reservation. Releasing twice refunds only once.

        Args:
            reservation: Reservation returned by reserve()

        Returns:
            Updated tracker
        """
        with logfire.span(
            "points_service.release",
            user_id=reservation.user_id,
            amount=reservation.amount,
        ):
            async with self.locks.hold(("points", reservation.user_id)):
                tracker = await self._get_or_create(reservation.user_id)
                if reservation.released or not reservation.amount:
                    reservation.released = True
                    return tracker

                reservation.released = True
                updated = await self._apply(tracker, reservation.amount)
                logfire.info(
                    "Points reservation released",
                    user_id=reservation.user_id,
                    amount=reservation.amount,
                )
                return updated

    async def _get_or_create(self, user_id: UserId) -> UserPointsTracker:
        # Caller holds the user's lock
        tracker = await self.points_repository.find_by_user(user_id)
        if tracker is None:
            tracker = await self.points_repository.save(
                UserPointsTracker(
                    user_id=user_id,
                    total_points=self.settings.default_balance,
                    remaining_points=self.settings.default_balance,
                )
            )
            logfire.info(
                "Points tracker created",
                user_id=user_id,
                balance=self.settings.default_balance,
            )
        return tracker

    async def _apply(self, tracker: UserPointsTracker, delta: int) -> UserPointsTracker:
        return await self.points_repository.save(
            tracker.model_copy(
                update={
                    "total_points": tracker.total_points + delta,
                    "remaining_points": tracker.remaining_points + delta,
                }
            )
        )
