"""Skill 도메인의 SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, Integer, String, Index
from app.database import Base


class Skill(Base):
    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    percentage = Column(Integer, nullable=False)
    category = Column(String(20), nullable=False)  # frontend/backend/database/tools/cloud
    order = Column("display_order", Integer, nullable=False, default=0)

    __table_args__ = (
        Index("idx_skill_category_order", "category", "display_order"),
    )
