from sqlalchemy.orm import Session

from caspian.data.models.message import MessageFromModel, MessageToModel
from caspian.domain.schemas import MessageData
from caspian.repos.message_repo import MessageRepo
from caspian.utils.logging import get_logger

logger = get_logger(__name__)


class MessageService:
    def __init__(self, db: Session):
        self.repo = MessageRepo(db)

    def record_inbound(self, data: MessageData) -> MessageFromModel:
        """Zapis wiadomości z formularza kontaktowego."""
        saved = self.repo.add(
            MessageFromModel(
                subject=data.subject,
                from_name=data.from_name,
                from_email=data.from_email,
                message=data.message,
            )
        )
        logger.info(f"Message {saved.id} from {data.from_email} saved")
        return saved

    def record_order_confirmation(self, product_id: int, customer_id: int) -> MessageToModel:
        saved = self.repo.add(MessageToModel(product_id=product_id, customer_id=customer_id))
        logger.info(f"Order confirmation {saved.id} for customer {customer_id} saved")
        return saved
