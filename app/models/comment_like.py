from sqlalchemy import Column, BigInteger, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from app.database import Base


class CommentLike(Base):
    __tablename__ = "CommentLikes"
    
    userId = Column(BigInteger, ForeignKey("Users.id", ondelete="CASCADE"), primary_key=True)
    commentId = Column(BigInteger, ForeignKey("Comments.id", ondelete="CASCADE"), primary_key=True, index=True)
    createdAt = Column(DateTime, nullable=False, default=datetime.utcnow)
    
    # Relationships
    comment = relationship("Comment", back_populates="commentLikes")
