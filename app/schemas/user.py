from typing import Optional
from pydantic import BaseModel, Field

# --- Requests ---
# Fields are optional so the handlers answer with their own messages
class EmailRequest(BaseModel):
    email: Optional[str] = None

class VerifyOtpRequest(BaseModel):
    email: Optional[str] = None
    otp: Optional[str] = None

class CompleteProfileRequest(BaseModel):
    marks_10th: Optional[float] = Field(default=None, alias="marks10th")
    marks_12th: Optional[float] = Field(default=None, alias="marks12th")
    marks_grad: Optional[float] = Field(default=None, alias="marksGrad")
    stream: Optional[str] = None
    company: Optional[str] = None
    experience_months: Optional[int] = Field(default=None, alias="experienceMonths")
    colleges: Optional[list[str]] = None

    class Config:
        populate_by_name = True

    def has_academics(self) -> bool:
        # Zero marks count as missing
        return all([self.marks_10th, self.marks_12th, self.marks_grad, self.stream])
