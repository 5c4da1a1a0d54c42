"""Video 도메인의 SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, Integer, String, DateTime, Boolean
from app.database import Base


class Video(Base):
    __tablename__ = "videos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    video_id = Column(String(64), nullable=False)  # YouTube id
    thumbnail_url = Column(String(500), nullable=False)
    views = Column(Integer)
    published_at = Column(DateTime)
    featured = Column(Boolean, default=False, nullable=False)
    order = Column("display_order", Integer, nullable=False, default=0)
