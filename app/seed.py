"""
Populate the database with sample users, channels, videos and interactions.

Usage: python -m app.seed

All existing rows are removed first. Everything goes through the service
layer so the stored counters agree with the relationship tables.
"""
import logging

from sqlalchemy.orm import Session

from app.database import Base, SessionLocal, engine
from app import models  # noqa: F401
from app.models.category import Category
from app.models.reaction import ReactionKind
from app.schemas.channel import ChannelCreate
from app.schemas.comment import CommentCreate
from app.schemas.user import UserCreate
from app.schemas.video import VideoCreate
from app.services import channel_service, comment_service, user_service, video_service

logger = logging.getLogger(__name__)

SAMPLE_USERS = [
    {"username": "codemaster", "email": "codemaster@example.com", "password": "password123",
     "avatar": "https://i.pravatar.cc/150?img=1"},
    {"username": "devtips", "email": "devtips@example.com", "password": "password123",
     "avatar": "https://i.pravatar.cc/150?img=2"},
    {"username": "fullstackacademy", "email": "fullstack@example.com", "password": "password123",
     "avatar": "https://i.pravatar.cc/150?img=3"},
]

# owner index -> channel
SAMPLE_CHANNELS = [
    (0, {"channelName": "Code Master", "description": "Programming tutorials and coding tips",
         "category": Category.technology}),
    (1, {"channelName": "Dev Tips", "description": "Quick development tips and tricks",
         "category": Category.education}),
    (2, {"channelName": "Full Stack Academy", "description": "Complete web development courses",
         "category": Category.education}),
]

# channel index -> video
SAMPLE_VIDEOS = [
    (0, {"title": "React Hooks in 20 Minutes", "duration": "20:15", "category": Category.technology,
         "description": "Everything you need to start with useState and useEffect.",
         "videoUrl": "https://www.w3schools.com/html/mov_bbb.mp4", "tags": "react, hooks, javascript"}),
    (0, {"title": "JavaScript Array Methods", "duration": "14:02", "category": Category.technology,
         "description": "map, filter and reduce explained with examples.",
         "videoUrl": "https://www.w3schools.com/html/movie.mp4", "tags": "javascript, arrays"}),
    (1, {"title": "10 VS Code Shortcuts", "duration": "8:45", "category": Category.education,
         "description": "Work faster in your editor.",
         "videoUrl": "https://www.w3schools.com/html/mov_bbb.mp4", "tags": "vscode, productivity"}),
    (2, {"title": "Node.js REST API From Scratch", "duration": "45:30", "category": Category.education,
         "description": "Build and deploy a REST API.",
         "videoUrl": "https://www.w3schools.com/html/movie.mp4", "tags": "node, express, api"}),
]

# (user index, video index, reaction)
SAMPLE_REACTIONS = [
    (1, 0, ReactionKind.like),
    (2, 0, ReactionKind.like),
    (0, 2, ReactionKind.like),
    (2, 2, ReactionKind.dislike),
    (0, 3, ReactionKind.like),
]

# (user index, channel index)
SAMPLE_SUBSCRIPTIONS = [(1, 0), (2, 0), (0, 1), (0, 2), (1, 2)]

# (user index, video index, text)
SAMPLE_COMMENTS = [
    (1, 0, "Great explanation of useEffect!"),
    (2, 0, "Finally hooks make sense to me."),
    (0, 3, "Very thorough walkthrough, thanks."),
]

# (video index, view count)
SAMPLE_VIEWS = [(0, 5), (1, 2), (2, 3), (3, 4)]


def clear_database() -> None:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


def seed_database(db: Session) -> dict:
    """Create the sample data set in ``db`` and return the created rows by kind."""
    users = [user_service.register_user(db, UserCreate(**data))[0] for data in SAMPLE_USERS]
    logger.info("Created %d users", len(users))

    channels = [
        channel_service.create_channel(db, users[owner], ChannelCreate(**data))
        for owner, data in SAMPLE_CHANNELS
    ]
    logger.info("Created %d channels", len(channels))

    videos = [
        video_service.create_video(db, channels[index].owner, VideoCreate(channelId=channels[index].id, **data))
        for index, data in SAMPLE_VIDEOS
    ]
    logger.info("Created %d videos", len(videos))

    for video_index, count in SAMPLE_VIEWS:
        for _ in range(count):
            video_service.view_video(db, videos[video_index].id)

    for user_index, video_index, kind in SAMPLE_REACTIONS:
        video_service.toggle_reaction(db, videos[video_index].id, users[user_index], kind)

    for user_index, channel_index in SAMPLE_SUBSCRIPTIONS:
        channel_service.toggle_subscription(db, channels[channel_index].id, users[user_index])

    comments = [
        comment_service.create_comment(
            db, users[user_index], CommentCreate(text=text, videoId=str(videos[video_index].id))
        )
        for user_index, video_index, text in SAMPLE_COMMENTS
    ]
    logger.info("Created %d comments", len(comments))

    return {"users": users, "channels": channels, "videos": videos, "comments": comments}


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    logger.info("Clearing existing data...")
    clear_database()

    db = SessionLocal()
    try:
        seed_database(db)
    finally:
        db.close()
    logger.info("Database seeded successfully")


if __name__ == "__main__":
    main()
