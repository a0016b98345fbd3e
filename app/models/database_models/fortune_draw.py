# app/models/database_models/fortune_draw.py
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.data.database import Base
from app.models.database_models.fortune_template import isoformat


class FortuneDraw(Base):
    __tablename__ = "fortune_draws"

    id = Column(String, primary_key=True)
    session_id = Column(String, ForeignKey("fortune_sessions.id"), nullable=False, index=True)
    fortune_template_id = Column(String, ForeignKey("fortune_templates.id"), nullable=True)

    position_index = Column(Integer, nullable=True)  # 1, 2, 3 in a spread
    interpreted_text = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=func.now())

    session = relationship("FortuneSession", back_populates="draws")
    template = relationship("FortuneTemplate", back_populates="draws")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "sessionId": self.session_id,
            "fortuneTemplateId": self.fortune_template_id,
            "positionIndex": self.position_index,
            "interpretedText": self.interpreted_text,
            "createdAt": isoformat(self.created_at),
        }
