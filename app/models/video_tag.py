from sqlalchemy import Column, BigInteger, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base


class VideoTag(Base):
    __tablename__ = "VideoTags"
    
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    videoId = Column(BigInteger, ForeignKey("Videos.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False, index=True)
    
    # Relationships
    video = relationship("Video", back_populates="tagEntries")
