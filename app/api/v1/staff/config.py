from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import get_current_user, get_current_admin_user
from app.models.user import User
from app.schemas.configuration import CatalogConfig, CatalogConfigUpdate
from app.services import config_service

router = APIRouter(prefix="/config", tags=["Configuration"])


@router.get("/", response_model=CatalogConfig)
def get_config(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Theatre and time-slot catalogs offered by the booking form."""
    return CatalogConfig(**config_service.get_catalog(db))


@router.post("/", response_model=CatalogConfig)
def update_config(
    body: CatalogConfigUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin_user),
):
    catalog = config_service.update_catalog(db, body.theatres, body.time_slots, admin.id)
    return CatalogConfig(**catalog)
