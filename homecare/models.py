from datetime import datetime

from sqlalchemy import Integer, String, Text, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column
from .db import Base


class Organ(Base):
    __tablename__ = "organs"
    organ_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    organ_name: Mapped[str] = mapped_column(String(100), nullable=False)
    organ_system: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)


class Disease(Base):
    __tablename__ = "diseases"
    disease_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    disease_name: Mapped[str] = mapped_column(String(150), nullable=False, index=True)
    organ_system: Mapped[str] = mapped_column(String(100), nullable=False)
    severity_level: Mapped[str] = mapped_column(String(20), nullable=False, default="moderate")
    description: Mapped[str] = mapped_column(Text, nullable=False)
    symptoms: Mapped[str] = mapped_column(Text, nullable=False)
    causes: Mapped[str | None] = mapped_column(Text, nullable=True)
    precautions: Mapped[str | None] = mapped_column(Text, nullable=True)
    transmission: Mapped[str | None] = mapped_column(Text, nullable=True)
    treatment: Mapped[str | None] = mapped_column(Text, nullable=True)
    medicines: Mapped[str | None] = mapped_column(Text, nullable=True)

    def to_dict(self) -> dict:
        return {c.name: getattr(self, c.name) for c in self.__table__.columns}


class MedicalHistory(Base):
    __tablename__ = "medical_history"
    history_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # users live in the accounts service; no FK here
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    symptoms: Mapped[str] = mapped_column(Text, nullable=False)
    predicted_disease: Mapped[str] = mapped_column(String(150), nullable=False)
    confidence_score: Mapped[int] = mapped_column(Integer, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    consultation_date: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), nullable=False)
