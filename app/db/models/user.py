from sqlalchemy import Column, Integer, String, Boolean, DateTime, Float, JSON

from app.core.utils import utcnow
from app.db.base_class import Base

class User(Base):
    __tablename__ = "users"

    # --- Identity ---
    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    phone = Column(String, nullable=True)
    is_verified = Column(Boolean, default=False)

    # --- Academic profile ---
    acad_10th = Column(Float, nullable=True)
    acad_12th = Column(Float, nullable=True)
    acad_grad = Column(Float, nullable=True)
    acad_stream = Column(String, nullable=True)

    # --- Work experience ---
    current_company = Column(String, nullable=True)
    work_ex_months = Column(Integer, default=0)

    # Canonical college names the user is aiming for
    target_colleges = Column(JSON, default=list)

    profile_complete = Column(Boolean, default=False)
    created_at = Column(DateTime, default=utcnow, index=True)
    updated_at = Column(DateTime, default=utcnow)

    def to_public_dict(self) -> dict:
        return {
            "id": self.id,
            "email": self.email,
            "phone": self.phone,
            "isVerified": bool(self.is_verified),
            "profileComplete": bool(self.profile_complete),
            "currentCompany": self.current_company,
            "workExMonths": self.work_ex_months,
            "marks10th": self.acad_10th,
            "marks12th": self.acad_12th,
            "marksGrad": self.acad_grad,
            "stream": self.acad_stream,
            "targetColleges": list(self.target_colleges or []),
        }
