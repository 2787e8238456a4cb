# ---------- routes/crud_routes.py ----------
"""
Router factory for the per-entity CRUD endpoints.

Each entity gets a collection path (``/users``) accepting POST and GET, and an
item path (``/user/{id}``) accepting GET, PUT and DELETE. Any other verb on
either path is answered with 405 by the app-level handler in ``main``.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.orm import Session
from starlette.convertors import Convertor, register_url_convertor

from budgetbook.database import get_db
from budgetbook.errors import StoreError, DuplicateKeyError
from budgetbook.logging_setup import get_logger
from budgetbook.schemas import INT32_MIN, INT32_MAX
from budgetbook.services.crud_service import CrudService

logger = get_logger(__name__)

NOT_FOUND = "Not Found!"


class SignedIntConvertor(Convertor):
    """Like Starlette's `int` convertor, but also matches negative ids."""

    regex = "-?[0-9]+"

    def convert(self, value: str) -> int:
        return int(value)

    def to_string(self, value: int) -> str:
        return str(int(value))


register_url_convertor("signed_int", SignedIntConvertor())

# Ids outside the INTEGER column range are rejected as a bad request.
RecordId = Annotated[int, Path(ge=INT32_MIN, le=INT32_MAX)]


def store_failure(exc: StoreError, conflict_detail: str = "Record already exists.") -> HTTPException:
    """Map a store failure to its HTTP error; the raw store text is passed through on 500."""
    if isinstance(exc, DuplicateKeyError):
        logger.error("Conflict on unique column. %s", exc)
        return HTTPException(status_code=403, detail=conflict_detail)
    logger.error("Internal Error Occured. %s", exc)
    return HTTPException(status_code=500, detail=str(exc))


def build_crud_router(
    *,
    collection: str,
    item: str,
    schema,
    service: CrudService,
    label: str,
    conflict_detail: str = "Record already exists.",
) -> APIRouter:
    """Build the five CRUD endpoints for one entity."""
    router = APIRouter(tags=[label])
    item_path = f"{item}/{{record_id:signed_int}}"

    @router.post(collection)
    def create_record(body: schema, db: Session = Depends(get_db)):
        try:
            body.id = service.create(db, body.fields())
        except StoreError as e:
            raise store_failure(e, conflict_detail)
        logger.info("New %s Created. id=%d", label, body.id)
        return body

    @router.get(collection)
    def list_records(db: Session = Depends(get_db)):
        try:
            rows = service.list_all(db)
        except StoreError as e:
            raise store_failure(e, conflict_detail)
        logger.info("Retrieved %s List.", label)
        return [schema.model_validate(r) for r in rows]

    @router.get(item_path)
    def get_record(record_id: RecordId, db: Session = Depends(get_db)):
        try:
            rows = service.get_by_id(db, record_id)
        except StoreError as e:
            raise store_failure(e, conflict_detail)
        if not rows:
            logger.error("%s %d requested not found.", label, record_id)
            raise HTTPException(status_code=404, detail=NOT_FOUND)
        logger.info("Retrieved Information on %s %d.", label, record_id)
        # Single record is still wrapped in a list.
        return [schema.model_validate(r) for r in rows]

    @router.put(item_path)
    def update_record(record_id: RecordId, body: schema, db: Session = Depends(get_db)):
        try:
            updated = service.update_by_id(db, record_id, body.fields())
        except StoreError as e:
            raise store_failure(e, conflict_detail)
        if updated is None:
            logger.warning("No %s with id %d; nothing updated.", label, record_id)
        else:
            logger.info("Updated Information of %s %d.", label, record_id)
        body.id = record_id
        return body

    @router.delete(item_path)
    def delete_record(record_id: RecordId, db: Session = Depends(get_db)):
        try:
            row = service.delete_by_id(db, record_id)
        except StoreError as e:
            # A missing row surfaces as 500, not 404, matching the deployed API.
            raise store_failure(e, conflict_detail)
        logger.info("%s %d deleted from system.", label, record_id)
        return schema.model_validate(row)

    return router
