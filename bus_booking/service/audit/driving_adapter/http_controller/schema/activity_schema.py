from datetime import datetime
from typing import Dict, Optional
from uuid import UUID

from pydantic import BaseModel

from bus_booking.service.audit.domain.entity.activity_entity import (
    ActivityRecord,
    StoredMetadataValue,
)
from bus_booking.service.shared_kernel.domain.enum.activity_action import ActivityAction


class ActivityResponse(BaseModel):
    id: UUID
    admin_id: UUID
    action: ActivityAction
    description: str
    metadata: Dict[str, StoredMetadataValue]
    created_at: Optional[datetime] = None

    model_config = {
        'json_schema_extra': {
            'example': {
                'id': '01936d8f-5e73-7c4e-a9c5-123456789abc',
                'admin_id': '01936d8f-5e73-7c4e-a9c5-123456789abd',
                'action': 'BOOKING_APPROVED',
                'description': 'Approved booking for Kofi Asante (seat 12)',
                'metadata': {
                    'booking_id': '01936d8f-5e73-7c4e-a9c5-123456789abe',
                    'seat_number': 12,
                    'previous_status': 'pending',
                    'new_status': 'approved',
                },
                'created_at': '2025-01-10T10:30:00Z',
            }
        }
    }

    @classmethod
    def from_entity(cls, record: ActivityRecord) -> 'ActivityResponse':
        return cls(
            id=record.id,
            admin_id=record.admin_id,
            action=record.action,
            description=record.description,
            metadata=dict(record.metadata),
            created_at=record.created_at,
        )
