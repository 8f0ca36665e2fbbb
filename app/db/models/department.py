from sqlalchemy import Column, Integer, Text
from app.db.base import Base


class Department(Base):
    __tablename__ = "departments"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)

    name = Column(Text, nullable=False)

    url = Column(Text, nullable=False)
