"""Shared Kernel Interfaces"""

from bus_booking.service.shared_kernel.app.interface.i_activity_recorder import (
    ActivityMetadata,
    IActivityRecorder,
    MetadataValue,
)

__all__ = ['ActivityMetadata', 'IActivityRecorder', 'MetadataValue']
