from sqlalchemy import Column, BigInteger, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from datetime import datetime
from app.database import Base
import enum


class ReactionKind(str, enum.Enum):
    like = "like"
    dislike = "dislike"


class VideoReaction(Base):
    """One row per (user, video); the composite key keeps likes and dislikes disjoint."""
    __tablename__ = "VideoReactions"
    
    userId = Column(BigInteger, ForeignKey("Users.id", ondelete="CASCADE"), primary_key=True)
    videoId = Column(BigInteger, ForeignKey("Videos.id", ondelete="CASCADE"), primary_key=True, index=True)
    kind = Column(Enum(ReactionKind), nullable=False)
    createdAt = Column(DateTime, nullable=False, default=datetime.utcnow)
    
    # Relationships
    user = relationship("User", back_populates="reactions")
    video = relationship("Video", back_populates="reactions")
