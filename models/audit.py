from sqlalchemy import Column, Integer, String, Text, DateTime, Index, func
from models.base import Base


class AuditRecord(Base):
    """
    Stores every raw response fetched from the remote API.

    Purpose:
    - Immutable audit trail (rows are inserted or deleted, never updated)
    - Replay of exactly what the remote API answered

    Design Decisions:
    - parameters and response_data hold serialized JSON text
    - created_at is assigned by the database at insert time
    """
    __tablename__ = "api_responses"

    id = Column(Integer, primary_key=True, autoincrement=True)

    api_endpoint = Column(String(32), nullable=False)
    parameters = Column(Text, nullable=True)
    response_data = Column(Text, nullable=False)

    created_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())

    __table_args__ = (
        Index("idx_api_responses_endpoint", "api_endpoint"),
        Index("idx_api_responses_created", "created_at"),
    )
