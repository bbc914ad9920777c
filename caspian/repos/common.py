# caspian/repos/common.py
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from caspian.domain.errors import InsertOutcome


def insert_if_absent(db: Session, obj, key) -> InsertOutcome:
    """
    Odpowiednik INSERT IGNORE: jeśli wiersz o tym kluczu już jest, nic nie zmieniamy.
    Wyścig dwóch insertów kończy się IntegrityError na PK - wtedy sprawdzamy jeszcze raz.
    """
    model = type(obj)
    if db.get(model, key) is not None:
        return InsertOutcome.ALREADY_EXISTS

    db.add(obj)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        if db.get(model, key) is not None:
            return InsertOutcome.ALREADY_EXISTS
        raise
    return InsertOutcome.INSERTED
