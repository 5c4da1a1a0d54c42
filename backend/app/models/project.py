"""Project 도메인의 SQLAlchemy 모델 정의입니다."""

import json

from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, Index
from sqlalchemy.orm import relationship
from app.database import Base
from app.utils.helpers import utcnow


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    image_url = Column(String(500), nullable=False)
    technologies_json = Column("technologies", Text, nullable=False, default="[]")
    project_url = Column(String(500))
    github_url = Column(String(500))
    featured = Column(Boolean, default=False, nullable=False)
    author_id = Column(Integer)  # users.id, not enforced
    created_at = Column(DateTime, default=utcnow, nullable=False)

    author = relationship(
        "User",
        primaryjoin="foreign(Project.author_id) == User.id",
        viewonly=True,
        lazy="joined",
    )

    __table_args__ = (
        Index("idx_project_featured", "featured", "created_at"),
    )

    @property
    def technologies(self):
        if not self.technologies_json:
            return []
        try:
            parsed = json.loads(self.technologies_json)
        except json.JSONDecodeError:
            return []
        if isinstance(parsed, list):
            return [str(item) for item in parsed]
        return []

    @technologies.setter
    def technologies(self, value):
        self.technologies_json = json.dumps(list(value or []))

    @property
    def author_name(self):
        return self.author.name if self.author else None
