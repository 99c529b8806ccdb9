"""Profile service: get-or-create profiles keyed by auth user id."""

from collections.abc import Callable
from datetime import datetime

import structlog

from core.exceptions import BackendError, ProfileRaceUnresolvedError, ValidationError
from domain.entities.profile import Profile, ProfileRole, derive_profile_name
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class ProfileService:
    """Service layer for Profile business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def ensure(
        self,
        profile_id: str | None,
        email: str | None = None,
        name: str | None = None,
    ) -> Profile:
        """Return the profile for ``profile_id``, creating it if absent.

        Idempotent and safe under concurrent callers: the primary key on
        ``profiles.id`` lets exactly one insert commit. A caller whose insert
        hits the uniqueness violation rolls back and reads the winner's row
        once. Any other store failure propagates as ``BackendError``.
        """
        if not profile_id:
            raise ValidationError("Missing user id", field="id")

        async with self._uow_factory() as uow:
            # Fast path: no write when the profile already exists
            existing = await uow.profiles.get(profile_id)
            if existing:
                return existing

            now = datetime.utcnow()
            profile = Profile(
                id=profile_id,
                name=derive_profile_name(email, name),
                role=ProfileRole.CUSTOMER,
                created_at=now,
                updated_at=now,
            )

            try:
                created = await uow.profiles.create(profile)
                await uow.commit()
            except BackendError as exc:
                await uow.rollback()
                if not exc.is_unique_violation:
                    logger.error(
                        "profile_create_failed",
                        profile_id=profile_id,
                        store_code=exc.store_code,
                        error=exc.message,
                    )
                    raise

                logger.info("profile_create_race_lost", profile_id=profile_id)
                winner = await uow.profiles.get(profile_id)
                if winner is None:
                    raise ProfileRaceUnresolvedError(profile_id) from exc
                return winner

            logger.info("profile_created", profile_id=profile_id, role=created.role.value)
            return created
