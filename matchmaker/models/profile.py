# profile.py
from sqlalchemy import JSON, Boolean, Column, Date, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from matchmaker.database import Base


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)

    # Basic information
    first_name = Column(String(50), nullable=True)
    last_name = Column(String(50), nullable=True)
    date_of_birth = Column(Date, nullable=True)
    gender = Column(String(16), nullable=True)
    height = Column(Integer, nullable=True)
    weight = Column(Integer, nullable=True)
    phone = Column(String(16), nullable=True)
    marital_status = Column(String(32), nullable=True)
    complexion = Column(String(16), nullable=True)
    body_type = Column(String(16), nullable=True)

    # Location
    city = Column(String(50), nullable=True)
    state = Column(String(50), nullable=True)
    country = Column(String(50), nullable=True)

    # Education & career
    education = Column(String(100), nullable=True)
    occupation = Column(String(100), nullable=True)
    income = Column(String(50), nullable=True)
    company = Column(String(100), nullable=True)

    # Family
    father_name = Column(String(50), nullable=True)
    mother_name = Column(String(50), nullable=True)
    siblings = Column(Integer, nullable=True)
    family_type = Column(String(16), nullable=True)
    family_income = Column(String(50), nullable=True)

    # Religion & culture
    religion = Column(String(16), nullable=True)
    caste = Column(String(50), nullable=True)
    subcaste = Column(String(50), nullable=True)
    mother_tongue = Column(String(30), nullable=True)
    languages = Column(JSON, nullable=True, default=list)

    # Lifestyle
    diet = Column(String(32), nullable=True)
    smoking = Column(String(16), nullable=True)
    drinking = Column(String(16), nullable=True)
    disabilities = Column(String(200), nullable=True)
    bio = Column(Text, nullable=True)
    hobbies = Column(JSON, nullable=True, default=list)

    # Partner preferences
    partner_age_min = Column(Integer, nullable=True)
    partner_age_max = Column(Integer, nullable=True)
    partner_height_min = Column(Integer, nullable=True)
    partner_height_max = Column(Integer, nullable=True)
    partner_education = Column(String(100), nullable=True)
    partner_occupation = Column(String(100), nullable=True)
    partner_income = Column(String(50), nullable=True)
    partner_location = Column(JSON, nullable=True, default=list)

    # Derived from the required fields on full-profile updates; never written by callers.
    is_complete = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    user = relationship("User", back_populates="profile")
