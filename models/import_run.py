from sqlalchemy import Column, Integer, String, Enum, DateTime, Float, Text, Index
from datetime import datetime
from models.base import Base, ImportStatus


class ImportRun(Base):
    """
    Tracks each import step executed by the runner.

    Purpose:
    - Audit trail of import runs
    - Created/merged counts per file
    - Error tracking for failed steps
    """
    __tablename__ = "import_runs"

    id = Column(Integer, primary_key=True, autoincrement=True)

    entity_type = Column(String(50), nullable=False, index=True)
    file_path = Column(String(500), nullable=False)
    source_name = Column(String(50), nullable=False)

    status = Column(Enum(ImportStatus), default=ImportStatus.RUNNING, nullable=False, index=True)

    # Timestamps
    started_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    completed_at = Column(DateTime, nullable=True)
    duration_seconds = Column(Float, nullable=True)

    # Statistics
    records_processed = Column(Integer, default=0)
    records_created = Column(Integer, default=0)
    records_merged = Column(Integer, default=0)

    error_message = Column(Text, nullable=True)

    __table_args__ = (
        Index("idx_import_run_type_started", "entity_type", "started_at"),
    )
