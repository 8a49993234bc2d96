from sqlalchemy import CheckConstraint, Column, Date, Float, Integer, String, Text
from shared.config.database import Base

class Lesson(Base):
    __tablename__ = "lessons"
    __table_args__ = (
        CheckConstraint("spaces >= 0", name="ck_lessons_spaces_non_negative"),
    )

    id = Column(Integer, primary_key=True, index=True)
    subject = Column(String, nullable=False, index=True)
    location = Column(String, nullable=False)
    price = Column(Float, nullable=False)
    spaces = Column(Integer, nullable=False, default=0) # remaining seats
    title = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    date = Column(Date, nullable=True)
    image = Column(String, nullable=True)
