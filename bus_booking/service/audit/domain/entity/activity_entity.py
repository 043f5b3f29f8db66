from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional
from uuid import UUID

import attrs

from bus_booking.platform.exception.exceptions import ValidationError
from bus_booking.service.shared_kernel.domain.enum.activity_action import ActivityAction


StoredMetadataValue = str | int | float | bool


def normalize_metadata(metadata: Optional[Mapping[str, Any]]) -> Dict[str, StoredMetadataValue]:
    """
    Flatten metadata into JSON scalars

    datetime becomes an ISO-8601 string and Decimal a float. Nested values,
    None and any other type are rejected.
    """
    normalized: Dict[str, StoredMetadataValue] = {}
    for key, value in (metadata or {}).items():
        if not isinstance(key, str) or not key:
            raise ValidationError(f'metadata key {key!r} must be a non-empty string')
        if isinstance(value, datetime):
            normalized[key] = value.isoformat()
        elif isinstance(value, Decimal):
            normalized[key] = float(value)
        elif isinstance(value, (str, int, float, bool)):
            normalized[key] = value
        else:
            raise ValidationError(
                f'metadata value for {key!r} has unsupported type {type(value).__name__}'
            )
    return normalized


@attrs.frozen
class ActivityRecord:
    id: UUID
    admin_id: UUID
    action: ActivityAction
    description: str
    metadata: Dict[str, StoredMetadataValue] = attrs.field(factory=dict)
    created_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        *,
        id: UUID,
        admin_id: UUID,
        action: ActivityAction,
        description: str,
        metadata: Optional[Mapping[str, Any]] = None,
    ) -> 'ActivityRecord':
        description = (description or '').strip()
        if not description:
            raise ValidationError('description is required')

        return cls(
            id=id,
            admin_id=admin_id,
            action=ActivityAction(action),
            description=description,
            metadata=normalize_metadata(metadata),
            created_at=datetime.now(timezone.utc),
        )
