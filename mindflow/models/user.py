# mindflow/models/user.py
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from mindflow.db.base import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt hash
    name = Column(String(100), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    moods = relationship("MoodEntry", back_populates="user", cascade="all, delete-orphan", lazy="select")
    events = relationship("CalendarEvent", back_populates="user", cascade="all, delete-orphan", lazy="select")
