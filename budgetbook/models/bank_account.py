from sqlalchemy import Column, Integer, String
from budgetbook.database import Base


class BankAccount(Base):
    __tablename__ = "bankaccount"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, default="")
    ownerid = Column(Integer, nullable=False, default=0)  # useraccount.id, not enforced
