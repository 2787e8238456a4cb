from sqlalchemy import Column, Integer, String
from budgetbook.database import Base


class UserAccount(Base):
    __tablename__ = "useraccount"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), unique=True, nullable=False)
    name = Column(String(255), nullable=False, default="")
    pin = Column(Integer, nullable=False, default=0)  # plaintext, matched exactly by /authorize
