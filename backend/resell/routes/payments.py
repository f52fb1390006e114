# resell/routes/payments.py
from fastapi import APIRouter, Depends

from resell.schemas.payment import PaymentIntentCreate, PaymentIntentOut
from resell.services.payments import PaymentGateway, get_payment_gateway

payment_router = APIRouter(tags=["Payments"])


@payment_router.post("/create-payment-intent", response_model=PaymentIntentOut)
async def create_payment_intent(
    data: PaymentIntentCreate,
    payments: PaymentGateway = Depends(get_payment_gateway),
):
    """Stripe PaymentIntent for `price` (taka), charged in paisa."""
    client_secret = await payments.create_intent(data.price)
    return {"clientSecret": client_secret}
