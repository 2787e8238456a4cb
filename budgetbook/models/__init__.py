# Import all models so they register with SQLAlchemy Base.metadata
# This ensures Base.metadata.create_all() creates all tables

from budgetbook.models.user_account import UserAccount
from budgetbook.models.bank_account import BankAccount
from budgetbook.models.bucket import Bucket
from budgetbook.models.line_item import LineItem

__all__ = [
    "UserAccount",
    "BankAccount",
    "Bucket",
    "LineItem",
]
