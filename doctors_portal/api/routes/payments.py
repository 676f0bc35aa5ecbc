from fastapi import APIRouter, Depends

from ..deps import get_payment_service
from ...services.payment_service import PaymentService
from ...schemas.payment import PaymentIntentRequest, PaymentIntentResponse

router = APIRouter(tags=["Payments"])

@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
def create_payment_intent(
    payment_data: PaymentIntentRequest,
    payment_service: PaymentService = Depends(get_payment_service)
):
    """Start a card checkout and hand the client secret back to the browser."""
    client_secret = payment_service.create_payment_intent(payment_data.cost)
    return PaymentIntentResponse(clientSecret=client_secret)
