from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr

from bus_booking.service.inventory.driving_adapter.http_controller.schema.seat_schema import (
    SeatResponse,
)
from bus_booking.service.shared_kernel.domain.enum.booking_status import BookingStatus
from bus_booking.service.shared_kernel.domain.enum.payment_status import PaymentStatus
from bus_booking.service.ticketing.domain.booking_stats import DashboardStats
from bus_booking.service.ticketing.domain.entity.booking_entity import Booking
from bus_booking.service.ticketing.domain.value_object.booking_seat_change import (
    BookingSeatChange,
)


class BookingCreateRequest(BaseModel):
    full_name: str
    email: EmailStr
    phone: str
    contact_person_name: str
    contact_person_phone: str
    passenger_class: str
    pickup_point_id: UUID
    destination_id: UUID
    departure_date: date
    seat_number: int
    bus_type: Optional[str] = None
    referral: Optional[str] = None

    model_config = {
        'json_schema_extra': {
            'example': {
                'full_name': 'Kofi Asante',
                'email': 'kofi@example.com',
                'phone': '0241234567',
                'contact_person_name': 'Ama Asante',
                'contact_person_phone': '0209876543',
                'passenger_class': 'Level 100',
                'pickup_point_id': '01936d8f-5e73-7c4e-a9c5-123456789abc',
                'destination_id': '01936d8f-5e73-7c4e-a9c5-123456789abd',
                'departure_date': '2025-02-14',
                'seat_number': 12,
                'bus_type': 'Economical',
                'referral': None,
            }
        }
    }


class BookingResponse(BaseModel):
    id: UUID
    full_name: str
    email: str
    phone: str
    contact_person_name: str
    contact_person_phone: str
    passenger_class: str
    bus_type: str
    referral: Optional[str] = None
    pickup_point_id: UUID
    destination_id: UUID
    departure_date: date
    seat_number: int
    amount: Decimal
    status: BookingStatus
    payment_status: PaymentStatus
    payment_reference: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, booking: Booking) -> 'BookingResponse':
        return cls(
            id=booking.id,
            full_name=booking.full_name,
            email=booking.email,
            phone=booking.phone,
            contact_person_name=booking.contact_person_name,
            contact_person_phone=booking.contact_person_phone,
            passenger_class=booking.passenger_class,
            bus_type=booking.bus_type,
            referral=booking.referral,
            pickup_point_id=booking.pickup_point_id,
            destination_id=booking.destination_id,
            departure_date=booking.departure_date,
            seat_number=booking.seat_number,
            amount=booking.amount,
            status=booking.status,
            payment_status=booking.payment_status,
            payment_reference=booking.payment_reference,
            created_at=booking.created_at,
            updated_at=booking.updated_at,
        )


class BookingSeatChangeResponse(BaseModel):
    """Post-state of the booking and of its seat after a command"""

    booking: BookingResponse
    seat: Optional[SeatResponse] = None

    @classmethod
    def from_change(cls, change: BookingSeatChange) -> 'BookingSeatChangeResponse':
        return cls(
            booking=BookingResponse.from_entity(change.booking),
            seat=SeatResponse.from_entity(change.seat) if change.seat else None,
        )


class DashboardStatsResponse(BaseModel):
    total_bookings: int
    pending_bookings: int
    approved_bookings: int
    cancelled_bookings: int
    paid_bookings: int
    total_revenue: Decimal
    pending_revenue: Decimal
    capacity: int
    available_seats: int
    occupied_seats: int
    blocked_seats: int
    approved_seats: int
    pending_seats: int

    @classmethod
    def from_stats(cls, stats: DashboardStats) -> 'DashboardStatsResponse':
        return cls(
            total_bookings=stats.total_bookings,
            pending_bookings=stats.pending_bookings,
            approved_bookings=stats.approved_bookings,
            cancelled_bookings=stats.cancelled_bookings,
            paid_bookings=stats.paid_bookings,
            total_revenue=stats.total_revenue,
            pending_revenue=stats.pending_revenue,
            capacity=stats.capacity,
            available_seats=stats.available_seats,
            occupied_seats=stats.occupied_seats,
            blocked_seats=stats.blocked_seats,
            approved_seats=stats.approved_seats,
            pending_seats=stats.pending_seats,
        )


class PaymentCallbackRequest(BaseModel):
    booking_id: UUID
    reference: str
    success: bool

    model_config = {
        'json_schema_extra': {
            'example': {
                'booking_id': '01936d8f-5e73-7c4e-a9c5-123456789abc',
                'reference': 'T123456789',
                'success': True,
            }
        }
    }


class PaymentCallbackResponse(BaseModel):
    booking_id: UUID
    payment_status: PaymentStatus
    payment_reference: Optional[str] = None
