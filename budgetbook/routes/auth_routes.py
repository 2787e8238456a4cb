# ---------- routes/auth_routes.py ----------
"""
Credential lookup. A matching username + pin returns the stored user; no
token, session or cookie is issued.
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from budgetbook.database import get_db
from budgetbook.errors import StoreError
from budgetbook.logging_setup import get_logger
from budgetbook.routes.crud_routes import store_failure
from budgetbook.schemas import LoginRequest, UserAccountRecord
from budgetbook.services.auth_service import AuthService

logger = get_logger(__name__)

router = APIRouter(tags=["Auth"])


@router.post("/authorize")
def authorize(body: LoginRequest, db: Session = Depends(get_db)):
    try:
        users = AuthService.find_by_credentials(db, body.username, body.pin)
    except StoreError as e:
        raise store_failure(e)
    logger.info("Authorization request received.")

    if not users:
        logger.error("Authorization failed for username %r.", body.username)
        raise HTTPException(status_code=404, detail="Not Found")

    return UserAccountRecord.model_validate(users[0])
