"""
crud_service.py: one insert/select/update/delete statement per operation,
shared by every entity table.
"""

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from budgetbook.errors import StoreError, DuplicateKeyError, NoRowsError

# Postgres and SQLite wording for a unique constraint violation.
DUPLICATE_KEY_MARKERS = (
    "duplicate key value violates unique constraint",
    "UNIQUE constraint failed",
)


def store_message(exc: SQLAlchemyError) -> str:
    """The driver's own error text, without SQLAlchemy's statement dump."""
    orig = getattr(exc, "orig", None)
    return str(orig).strip() if orig is not None else str(exc)


def classify(exc: SQLAlchemyError) -> StoreError:
    message = store_message(exc)
    if isinstance(exc, IntegrityError) and any(m in message for m in DUPLICATE_KEY_MARKERS):
        return DuplicateKeyError(message)
    return StoreError(message)


class CrudService:
    """Data access for a single table, described by its ORM model."""

    def __init__(self, model):
        self.model = model
        self.table = model.__table__

    def create(self, db: Session, data: dict) -> int:
        """Insert a row and return the generated id."""
        try:
            record = self.model(**data)
            db.add(record)
            db.commit()
            db.refresh(record)
            return record.id
        except SQLAlchemyError as e:
            db.rollback()
            raise classify(e) from e

    def list_all(self, db: Session) -> list:
        try:
            return db.query(self.model).all()
        except SQLAlchemyError as e:
            raise classify(e) from e

    def get_by_id(self, db: Session, record_id: int) -> list:
        """Zero or one rows; callers check the length."""
        try:
            return db.query(self.model).filter_by(id=record_id).all()
        except SQLAlchemyError as e:
            raise classify(e) from e

    def update_by_id(self, db: Session, record_id: int, data: dict) -> int | None:
        """Replace every mutable column. Returns the id, or None when no row matched."""
        try:
            count = (
                db.query(self.model)
                .filter_by(id=record_id)
                .update(data, synchronize_session=False)
            )
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise classify(e) from e
        return record_id if count else None

    def delete_by_id(self, db: Session, record_id: int) -> dict:
        """Delete a row and return its prior values. Raises NoRowsError when absent."""
        stmt = delete(self.table).where(self.table.c.id == record_id).returning(*self.table.c)
        try:
            row = db.execute(stmt).mappings().first()
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise classify(e) from e
        if row is None:
            raise NoRowsError()
        return dict(row)
