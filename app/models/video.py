from sqlalchemy import Column, BigInteger, Integer, String, DateTime, Text, ForeignKey, Enum, Boolean
from sqlalchemy.orm import relationship
from datetime import datetime
from app.database import Base
from app.models.category import Category
from app.models.reaction import ReactionKind


class Video(Base):
    __tablename__ = "Videos"
    # Ids are never reused: comments keep pointing at a deleted video's id
    __table_args__ = {"sqlite_autoincrement": True}
    
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, index=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    description = Column(Text)
    videoUrl = Column(String(500), nullable=False)
    thumbnailUrl = Column(String(500))
    duration = Column(String(20), nullable=False, default="0:00")  # free text, e.g. "12:34"
    views = Column(BigInteger, nullable=False, default=0, index=True)
    likeCount = Column(Integer, nullable=False, default=0)
    dislikeCount = Column(Integer, nullable=False, default=0)
    commentCount = Column(Integer, nullable=False, default=0)
    channelId = Column(BigInteger, ForeignKey("Channels.id", ondelete="CASCADE"), nullable=False, index=True)
    uploaderId = Column(BigInteger, ForeignKey("Users.id", ondelete="CASCADE"), nullable=False, index=True)
    category = Column(Enum(Category), nullable=False, index=True)
    isPublic = Column(Boolean, nullable=False, default=True)
    isActive = Column(Boolean, nullable=False, default=True)
    createdAt = Column(DateTime, nullable=False, default=datetime.utcnow, index=True)
    updatedAt = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    # Relationships
    channel = relationship("Channel", back_populates="uploads")
    uploader = relationship("User")
    reactions = relationship("VideoReaction", back_populates="video", cascade="all, delete")
    tagEntries = relationship("VideoTag", back_populates="video", cascade="all, delete-orphan", order_by="VideoTag.id")
    
    @property
    def likes(self):
        return [r.userId for r in self.reactions if r.kind == ReactionKind.like]
    
    @property
    def dislikes(self):
        return [r.userId for r in self.reactions if r.kind == ReactionKind.dislike]
    
    @property
    def tags(self):
        return [tag.name for tag in self.tagEntries]
