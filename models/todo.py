from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey, Index, func
from sqlalchemy.orm import relationship
from models.base import Base


class Todo(Base):
    """
    Todos owned by a user; deleting the user removes them.

    completed is stored as 0/1 so it can be filtered with plain equality.
    """
    __tablename__ = "todos"

    id = Column(Integer, primary_key=True, autoincrement=False)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=True, index=True)

    title = Column(Text, nullable=True)
    completed = Column(Integer, nullable=True)

    updated_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())

    user = relationship("User", back_populates="todos")

    __table_args__ = (
        Index("idx_todos_completed", "completed"),
    )
