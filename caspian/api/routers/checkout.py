from fastapi import APIRouter, Depends, HTTPException, Request

from caspian.domain.errors import BadRequestError, PaymentError
from caspian.domain.schemas import CheckoutIn, CheckoutOut
from caspian.services.checkout_service import CheckoutService
from caspian.services.payment_client import PaymentClient

router = APIRouter(tags=["checkout"])


def get_payment_client(request: Request) -> PaymentClient:
    return request.app.state.payment_client


@router.post("/checkout", response_model=CheckoutOut)
def checkout(payload: CheckoutIn, payment_client: PaymentClient = Depends(get_payment_client)):
    svc = CheckoutService(payment_client)
    try:
        client_secret = svc.checkout(payload)
    except BadRequestError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except PaymentError as e:
        raise HTTPException(status_code=500, detail=e.message)
    return CheckoutOut(client_secret=client_secret)
