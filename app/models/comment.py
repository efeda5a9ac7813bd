from sqlalchemy import Column, BigInteger, Integer, String, DateTime, ForeignKey, Boolean
from sqlalchemy.orm import relationship
from datetime import datetime
from app.database import Base


class Comment(Base):
    __tablename__ = "Comments"
    
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, index=True, autoincrement=True)
    text = Column(String(1000), nullable=False)
    authorId = Column(BigInteger, ForeignKey("Users.id", ondelete="CASCADE"), nullable=False, index=True)
    # Plain identifier, not a foreign key: comments may outlive their video
    videoId = Column(String(64), nullable=False, index=True)
    likeCount = Column(Integer, nullable=False, default=0)
    isEdited = Column(Boolean, nullable=False, default=False)
    editedAt = Column(DateTime)
    isActive = Column(Boolean, default=True)
    createdAt = Column(DateTime, nullable=False, default=datetime.utcnow, index=True)
    updatedAt = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    # Relationships
    author = relationship("User")
    commentLikes = relationship(
        "CommentLike",
        back_populates="comment",
        cascade="all, delete",
        order_by="CommentLike.createdAt"
    )
    
    @property
    def likes(self):
        return [like.userId for like in self.commentLikes]
