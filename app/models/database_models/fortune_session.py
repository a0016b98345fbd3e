# app/models/database_models/fortune_session.py
from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.data.database import Base
from app.models.database_models.fortune_template import isoformat


class FortuneSession(Base):
    __tablename__ = "fortune_sessions"

    id = Column(String, primary_key=True)
    user_id = Column(String, nullable=False, index=True)

    question = Column(Text, nullable=True)
    spread_type = Column(String, nullable=True)  # "single-card", "three-card", ...
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=func.now())

    draws = relationship("FortuneDraw", back_populates="session")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "userId": self.user_id,
            "question": self.question,
            "spreadType": self.spread_type,
            "notes": self.notes,
            "createdAt": isoformat(self.created_at),
        }
