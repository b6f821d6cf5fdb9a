from sqlalchemy import Column, String, DateTime, JSON
from golfcartly.core.database import Base


class HttpSession(Base):
    __tablename__ = "http_sessions"

    sid = Column(String(255), primary_key=True)
    data = Column(JSON, nullable=False, default=dict)
    expire = Column(DateTime, nullable=False, index=True)
