from sqlalchemy import Column, Text
from app.database import Base


class SavedResume(Base):
    __tablename__ = "saved_resumes"

    id = Column(Text, primary_key=True)
    user_id = Column(Text, nullable=False, index=True)
    name = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    content_hash = Column(Text)
    created_at = Column(Text, nullable=False)
