from sqlalchemy import Column, BigInteger, Integer, String, DateTime, Text, ForeignKey, Enum, Boolean
from sqlalchemy.orm import relationship
from datetime import datetime
from app.database import Base
from app.models.category import Category


class Channel(Base):
    __tablename__ = "Channels"
    
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, index=True, autoincrement=True)
    channelName = Column(String(100), nullable=False)
    handle = Column(String(30), unique=True, nullable=False, index=True)
    description = Column(Text)
    ownerId = Column(BigInteger, ForeignKey("Users.id", ondelete="CASCADE"), nullable=False, index=True)
    avatar = Column(String(500))
    banner = Column(String(500))
    subscriberCount = Column(Integer, nullable=False, default=0)
    videoCount = Column(Integer, nullable=False, default=0)
    totalViews = Column(BigInteger, nullable=False, default=0)
    category = Column(Enum(Category), nullable=False, default=Category.entertainment)
    isVerified = Column(Boolean, nullable=False, default=False)
    isActive = Column(Boolean, nullable=False, default=True, index=True)
    createdAt = Column(DateTime, nullable=False, default=datetime.utcnow, index=True)
    updatedAt = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    # Relationships
    owner = relationship("User", back_populates="ownedChannels")
    subscriptions = relationship(
        "Subscription",
        back_populates="channel",
        cascade="all, delete",
        order_by="Subscription.createdAt"
    )
    uploads = relationship("Video", back_populates="channel", cascade="all, delete", order_by="Video.id")
    
    @property
    def subscribers(self):
        return [s.userId for s in self.subscriptions]
    
    @property
    def videos(self):
        return [video.id for video in self.uploads]
