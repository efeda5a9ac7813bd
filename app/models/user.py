from sqlalchemy import Column, BigInteger, Integer, String, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
from app.database import Base
from app.models.reaction import ReactionKind


class User(Base):
    __tablename__ = "Users"
    
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, index=True, autoincrement=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    avatar = Column(String(500))
    createdAt = Column(DateTime, nullable=False, default=datetime.utcnow)
    updatedAt = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    # Relationships
    ownedChannels = relationship("Channel", back_populates="owner", order_by="Channel.id")
    reactions = relationship(
        "VideoReaction",
        back_populates="user",
        cascade="all, delete",
        order_by="VideoReaction.createdAt"
    )
    subscriptions = relationship(
        "Subscription",
        back_populates="user",
        cascade="all, delete",
        order_by="Subscription.createdAt"
    )
    
    # Back-reference id lists, derived from the relationship tables
    @property
    def channels(self):
        return [channel.id for channel in self.ownedChannels]
    
    @property
    def likedVideos(self):
        return [r.videoId for r in self.reactions if r.kind == ReactionKind.like]
    
    @property
    def dislikedVideos(self):
        return [r.videoId for r in self.reactions if r.kind == ReactionKind.dislike]
    
    @property
    def subscribedChannels(self):
        return [s.channelId for s in self.subscriptions]
