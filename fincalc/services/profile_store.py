"""Financial Profile Store — records calculator inputs per user.

Invariants:
    - user_id must be an integer; it is NOT checked against existing accounts
    - create rejects user_id outside the 64-bit id range; list_by_user returns []
      for such ids without a storage round trip
    - Each numeric field present (not None) must be a finite number; bounds are
      a caller concern (negative values are stored as given)
    - Unknown field names are rejected rather than silently dropped
    - list_by_user returns creation order; unknown users yield an empty list
"""

import logging

from fincalc.core.domain_types import PROFILE_FIELD_NAMES
from fincalc.core.errors import ValidationError
from fincalc.core.records import FinancialProfile
from fincalc.core.repository_protocols import FinancialProfileRepository
from fincalc.core.validation import (
    is_storable_identifier, require_finite_number, require_identifier,
    require_storable_identifier,
)
from fincalc.services.storage_calls import call_with_timeout

logger = logging.getLogger(__name__)


def _validate_profile_fields(fields: dict[str, object]) -> dict[str, float | None]:
    unknown = sorted(set(fields) - PROFILE_FIELD_NAMES)
    if unknown:
        raise ValidationError(
            f"Unknown profile field(s): {', '.join(unknown)}", unknown[0],
        )
    return {
        name: None if value is None else require_finite_number(value, name)
        for name, value in fields.items()
    }


class FinancialProfileStore:
    def __init__(
        self,
        repository: FinancialProfileRepository,
        timeout_seconds: float | None = None,
    ):
        self._repository = repository
        self._timeout = timeout_seconds

    async def create(self, user_id: object, **fields: object) -> FinancialProfile:
        user_id = require_storable_identifier(user_id, "user_id")
        values = _validate_profile_fields(fields)
        profile = await call_with_timeout(
            self._repository.insert(user_id, values),
            "profile.create", self._timeout,
        )
        logger.info(
            "Financial profile created",
            extra={"user_id": user_id, "operation": "profile.create"},
        )
        return profile

    async def list_by_user(self, user_id: object) -> list[FinancialProfile]:
        user_id = require_identifier(user_id, "user_id")
        if not is_storable_identifier(user_id):
            return []
        profiles = await call_with_timeout(
            self._repository.list_by_user(user_id),
            "profile.list_by_user", self._timeout,
        )
        logger.debug(
            "Financial profiles listed",
            extra={"user_id": user_id, "record_count": len(profiles)},
        )
        return profiles
