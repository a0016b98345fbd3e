# app/models/database_models/fortune_template.py
from sqlalchemy import Boolean, Column, DateTime, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.data.database import Base


def isoformat(value):
    return value.isoformat() if value else None


class FortuneTemplate(Base):
    """A reusable fortune text. Rows with no owner (user_id NULL) are system templates."""

    __tablename__ = "fortune_templates"

    id = Column(String, primary_key=True)
    user_id = Column(String, nullable=True, index=True)

    title = Column(String, nullable=True)
    body = Column(Text, nullable=False)
    category = Column(String, nullable=True, index=True)
    tone = Column(String, nullable=True)

    is_system = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, default=func.now())

    draws = relationship("FortuneDraw", back_populates="template")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "userId": self.user_id,
            "title": self.title,
            "body": self.body,
            "category": self.category,
            "tone": self.tone,
            "isSystem": self.is_system,
            "isActive": self.is_active,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }

    def __repr__(self) -> str:
        return f"<FortuneTemplate(id='{self.id}', user_id='{self.user_id}', is_system={self.is_system})>"
