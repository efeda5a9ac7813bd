from app.models.channel import Channel
from app.models.comment import Comment
from app.models.video import Video
from app.seed import SAMPLE_VIEWS, seed_database


def test_seeded_counters_match_relationships(db):
    created = seed_database(db)
    assert len(created["users"]) == 3

    for channel in db.query(Channel).all():
        assert channel.subscriberCount == len(channel.subscribers)
        assert channel.videoCount == len(channel.videos)
        assert channel.totalViews == sum(video.views for video in channel.uploads)

    for video in db.query(Video).all():
        assert not set(video.likes) & set(video.dislikes)
        assert video.likeCount == len(video.likes)
        assert video.dislikeCount == len(video.dislikes)
        assert video.commentCount == db.query(Comment).filter(Comment.videoId == str(video.id)).count()

    assert sum(video.views for video in db.query(Video).all()) == sum(count for _, count in SAMPLE_VIEWS)
