from sqlalchemy import Boolean, Column, Integer, Text, false

from worklog.database import Base


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)
    completed = Column(Boolean, nullable=True, server_default=false())
