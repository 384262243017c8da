"""Purchase endpoint."""

import asyncio
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status

from vendorpay.api.deps import get_payment_service
from vendorpay.schemas.payment import BuyRequest, ErrorResponse
from vendorpay.services.payment_service import PaymentService

logger = logging.getLogger(__name__)

router = APIRouter()

# nginx's "client closed request"; never seen by the departed caller
CLIENT_CLOSED_REQUEST = 499

_error_responses = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_403_FORBIDDEN: {"model": ErrorResponse},
    status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse},
    status.HTTP_504_GATEWAY_TIMEOUT: {"model": ErrorResponse},
}


async def _wait_for_disconnect(request: Request) -> None:
    """Return once the caller has gone away."""
    while True:
        message = await request.receive()
        if message["type"] == "http.disconnect":
            return


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    responses=_error_responses,
)
async def buy(
    buy_data: BuyRequest,
    request: Request,
    payment_service: Annotated[PaymentService, Depends(get_payment_service)],
) -> Response:
    """Pay a whitelisted vendor and return once the transfer is confirmed.

    The purchase is cancelled if the caller disconnects while it is still
    being submitted or confirmed.
    """
    logger.info(f"purchase of {buy_data.lamports} lamports for vendor {buy_data.vendor}")
    purchase = asyncio.create_task(payment_service.buy(buy_data))
    disconnect = asyncio.create_task(_wait_for_disconnect(request))
    try:
        await asyncio.wait({purchase, disconnect}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        for task in (purchase, disconnect):
            task.cancel()
        await asyncio.wait({purchase, disconnect})

    if purchase.cancelled():
        logger.warning(f"caller left before purchase for vendor {buy_data.vendor} completed")
        return Response(status_code=CLIENT_CLOSED_REQUEST)

    # re-raises the purchase's error kind for the exception handlers
    purchase.result()
    return Response(status_code=status.HTTP_200_OK)
