import secrets
from typing import Optional

from fastapi import APIRouter, Depends, Header

from bus_booking.platform.config.core_setting import settings
from bus_booking.platform.constant.route_constant import PAYMENT_SIGNATURE_HEADER
from bus_booking.platform.exception.exceptions import AuthenticationFailedError
from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.ticketing.app.command.confirm_payment_use_case import (
    ConfirmPaymentUseCase,
)
from bus_booking.service.ticketing.driving_adapter.http_controller.schema.booking_schema import (
    PaymentCallbackRequest,
    PaymentCallbackResponse,
)


router = APIRouter()


async def verify_payment_signature(
    signature: Optional[str] = Header(None, alias=PAYMENT_SIGNATURE_HEADER),
) -> None:
    expected = settings.PAYMENT_WEBHOOK_SECRET.get_secret_value()
    if not signature or not secrets.compare_digest(signature, expected):
        raise AuthenticationFailedError('Invalid payment signature')


@router.post('/callback', dependencies=[Depends(verify_payment_signature)])
@Logger.io
async def payment_callback(
    request: PaymentCallbackRequest,
    use_case: ConfirmPaymentUseCase = Depends(ConfirmPaymentUseCase.depends),
) -> PaymentCallbackResponse:
    booking = await use_case.execute(
        booking_id=request.booking_id, reference=request.reference, success=request.success
    )
    return PaymentCallbackResponse(
        booking_id=booking.id,
        payment_status=booking.payment_status,
        payment_reference=booking.payment_reference,
    )
