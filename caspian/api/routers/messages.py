from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from caspian.data.database import get_db
from caspian.domain.schemas import MessageFromIn, MessageToIn, MessageOut
from caspian.services.message_service import MessageService

router = APIRouter(tags=["messages"])


@router.post("/message-from", response_model=MessageOut)
def create_inbound_message(payload: MessageFromIn, db: Session = Depends(get_db)):
    MessageService(db).record_inbound(payload.data)
    return MessageOut(message="Message sent!")


@router.post("/message-to", response_model=MessageOut)
def create_order_confirmation(payload: MessageToIn, db: Session = Depends(get_db)):
    MessageService(db).record_order_confirmation(payload.product_id, payload.customer_id)
    return MessageOut(message="Order confirmation sent!")
