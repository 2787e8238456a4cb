from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from budgetbook.models.user_account import UserAccount
from budgetbook.services.crud_service import classify


class AuthService:
    @staticmethod
    def find_by_credentials(db: Session, username: str, pin: int) -> list:
        """Users whose username and pin both match exactly (at most one)."""
        try:
            return (
                db.query(UserAccount)
                .filter(UserAccount.username == username, UserAccount.pin == pin)
                .limit(1)
                .all()
            )
        except SQLAlchemyError as e:
            raise classify(e) from e
