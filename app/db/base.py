# Declarative base
from app.db.base_class import Base

# Every model must be imported here so create_all and the document store
# registry can see its table.
from app.db.models.user import User
from app.db.models.otp import OTP
from app.db.models.college import College
from app.db.models.article import NewsArticle
from app.db.models.security import UserSession
