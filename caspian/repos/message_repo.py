from sqlalchemy.orm import Session

from caspian.data.models.message import MessageFromModel, MessageToModel


class MessageRepo:
    def __init__(self, db: Session):
        self.db = db

    def add(self, message: MessageFromModel | MessageToModel):
        self.db.add(message)
        self.db.commit()
        self.db.refresh(message)
        return message
