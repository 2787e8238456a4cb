from sqlalchemy import Column, Integer, String, Float, Text
from budgetbook.database import Base


class LineItem(Base):
    __tablename__ = "lineitem"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    amount = Column(Float, nullable=False, default=0.0)
    # Reference columns are stored as given; no foreign keys are declared.
    bucket = Column(Integer, nullable=False, default=0)
    bank = Column(Integer, nullable=False, default=0)
    ownerid = Column(Integer, nullable=False, default=0)
