from sqlalchemy import Column, Integer, String, Text, DateTime, JSON

from app.core.utils import utcnow
from app.db.base_class import Base

class NewsArticle(Base):
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    summary = Column(Text, nullable=True)
    content = Column(Text, nullable=True)
    source_name = Column(String, nullable=True)
    source_url = Column(String, index=True, nullable=True)
    college_names = Column(JSON, default=list)
    published_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=utcnow, index=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "summary": self.summary,
            "source": {"name": self.source_name, "url": self.source_url},
            "college_names": list(self.college_names or []),
            "published_at": self.published_at.isoformat() if self.published_at else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
