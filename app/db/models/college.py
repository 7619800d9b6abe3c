from sqlalchemy import Column, Integer, String, Float, DateTime, JSON

from app.core.utils import utcnow
from app.db.base_class import Base

class College(Base):
    __tablename__ = "colleges"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, index=True, nullable=False)
    tier = Column(Integer, index=True, nullable=True)
    aliases = Column(JSON, default=list) # lower-case alternative spellings
    location = Column(String, nullable=True)
    website = Column(String, nullable=True)

    # --- Program data ---
    programs = Column(JSON, default=list)
    alumni_count = Column(Integer, nullable=True)
    rating = Column(Float, nullable=True)
    nirf_rank = Column(Integer, nullable=True)

    # --- Nested records, each carries its own updated_at ---
    placement = Column(JSON, default=dict)
    admission = Column(JSON, default=dict)
    fees = Column(JSON, default=dict)

    updated_at = Column(DateTime, default=utcnow)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "tier": self.tier,
            "aliases": list(self.aliases or []),
            "location": self.location,
            "website": self.website,
            "programs": list(self.programs or []),
            "alumni_count": self.alumni_count,
            "rating": self.rating,
            "nirf_rank": self.nirf_rank,
            "placement": self.placement or {},
            "admission": self.admission or {},
            "fees": self.fees or {},
        }
