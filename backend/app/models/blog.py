"""Blog 도메인의 SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, Index
from sqlalchemy.orm import relationship
from app.database import Base
from app.utils.helpers import utcnow


class Blog(Base):
    __tablename__ = "blogs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    slug = Column(String(220), unique=True, nullable=False)
    content = Column(Text, nullable=False)
    excerpt = Column(Text, nullable=False)
    image_url = Column(String(500), nullable=False)
    category_id = Column(Integer)  # categories.id, not enforced
    author_id = Column(Integer)  # users.id, not enforced
    published = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    # Dangling references resolve to None rather than failing the read.
    category = relationship(
        "Category",
        primaryjoin="foreign(Blog.category_id) == Category.id",
        viewonly=True,
        lazy="joined",
    )
    author = relationship(
        "User",
        primaryjoin="foreign(Blog.author_id) == User.id",
        viewonly=True,
        lazy="joined",
    )

    __table_args__ = (
        Index("idx_blog_published", "published", "created_at"),
    )

    @property
    def category_name(self):
        return self.category.name if self.category else None

    @property
    def author_name(self):
        return self.author.name if self.author else None
