from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from caspian.data.database import get_db
from caspian.domain.schemas import ProductOut
from caspian.services.catalog_service import CatalogService

router = APIRouter(tags=["products"])


@router.get("/products", response_model=List[ProductOut])
def list_products(db: Session = Depends(get_db)):
    return CatalogService(db).list_products()
