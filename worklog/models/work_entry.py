from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, text

from worklog.database import Base


class WorkEntry(Base):
    __tablename__ = "work_entries"
    __table_args__ = (
        Index(
            "uq_work_entries_open",
            "task_id",
            unique=True,
            postgresql_where=text("finished_on IS NULL"),
        ),
    )

    id = Column(Integer, primary_key=True)
    task_id = Column(Integer, ForeignKey("tasks.id"), nullable=True)

    started_on = Column(DateTime(timezone=True), nullable=True)
    finished_on = Column(DateTime(timezone=True), nullable=True)
