"""
Tests for comments: creation, ownership, likes and listing.
"""
import pytest

from app.models.comment import Comment
from app.models.comment_like import CommentLike
from app.schemas.comment import CommentCreate
from app.schemas.user import UserCreate
from app.services import comment_service, user_service


@pytest.fixture
def alice(make_user):
    return make_user("alice")


@pytest.fixture
def bob(make_user):
    return make_user("bob")


def post_comment(client, headers, video_id="42", text="First!"):
    response = client.post("/api/comments/", json={"text": text, "videoId": video_id}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestCreateComment:

    def test_create_trims_text(self, client, alice):
        comment = post_comment(client, alice[1], text="   Great video!  ")
        assert comment["text"] == "Great video!"
        assert comment["author"]["id"] == alice[0]["id"]
        assert comment["videoId"] == "42"
        assert comment["likeCount"] == 0
        assert comment["isEdited"] is False

    def test_blank_text_rejected(self, client, alice):
        response = client.post("/api/comments/", json={"text": "   ", "videoId": "42"}, headers=alice[1])
        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Comment text is required"}

    def test_video_id_required(self, client, alice):
        response = client.post("/api/comments/", json={"text": "Hello"}, headers=alice[1])
        assert response.status_code == 400
        assert response.json()["message"] == "Video ID is required"

    def test_numeric_video_id_accepted(self, client, alice):
        comment = post_comment(client, alice[1], video_id=7)
        assert comment["videoId"] == "7"

    def test_unknown_video_is_accepted(self, client, alice):
        comment = post_comment(client, alice[1], video_id="not-a-real-video")
        assert comment["videoId"] == "not-a-real-video"

    def test_requires_authentication(self, client):
        response = client.post("/api/comments/", json={"text": "Hi", "videoId": "1"})
        assert response.status_code == 401

    def test_comment_count_follows_existing_video(self, client, alice, make_channel, make_video):
        channel = make_channel(alice[1], channelName="Tech")
        video = make_video(alice[1], channel["id"])
        comment = post_comment(client, alice[1], video_id=str(video["id"]))
        post_comment(client, alice[1], video_id=str(video["id"]))
        assert client.get(f"/api/videos/{video['id']}").json()["data"]["commentCount"] == 2

        client.delete(f"/api/comments/{comment['id']}", headers=alice[1])
        assert client.get(f"/api/videos/{video['id']}").json()["data"]["commentCount"] == 1

    def test_id_beyond_key_range_is_accepted(self, client, alice):
        comment = post_comment(client, alice[1], video_id="99999999999999999999")
        assert comment["videoId"] == "99999999999999999999"
        listed = client.get("/api/comments/video/99999999999999999999").json()
        assert listed["count"] == 1

    def test_padded_id_does_not_count_toward_video(self, client, alice, make_channel, make_video):
        channel = make_channel(alice[1], channelName="Tech")
        video = make_video(alice[1], channel["id"])
        padded = post_comment(client, alice[1], video_id="0" + str(video["id"]))

        data = client.get(f"/api/videos/{video['id']}").json()["data"]
        assert data["commentCount"] == 0
        assert data["comments"] == []
        assert client.get(f"/api/comments/video/{video['id']}").json()["count"] == 0

        # Deleting it leaves the real video untouched
        post_comment(client, alice[1], video_id=str(video["id"]))
        client.delete(f"/api/comments/{padded['id']}", headers=alice[1])
        assert client.get(f"/api/videos/{video['id']}").json()["data"]["commentCount"] == 1


class TestEditAndDelete:

    def test_author_edit_marks_edited(self, client, alice):
        comment = post_comment(client, alice[1])
        response = client.put(f"/api/comments/{comment['id']}", json={"text": "Edited"}, headers=alice[1])
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["text"] == "Edited"
        assert data["isEdited"] is True
        assert data["editedAt"] is not None

    def test_edit_to_blank_rejected(self, client, alice):
        comment = post_comment(client, alice[1])
        response = client.put(f"/api/comments/{comment['id']}", json={"text": " "}, headers=alice[1])
        assert response.status_code == 400

    def test_non_author_forbidden(self, client, alice, bob):
        comment = post_comment(client, alice[1], text="Mine")
        assert client.put(f"/api/comments/{comment['id']}", json={"text": "Nope"}, headers=bob[1]).status_code == 403
        assert client.delete(f"/api/comments/{comment['id']}", headers=bob[1]).status_code == 403
        listed = client.get("/api/comments/video/42").json()["data"]
        assert [c["text"] for c in listed] == ["Mine"]

    def test_author_delete(self, client, alice):
        comment = post_comment(client, alice[1])
        assert client.delete(f"/api/comments/{comment['id']}", headers=alice[1]).status_code == 200
        assert client.get("/api/comments/video/42").json()["count"] == 0
        assert client.delete(f"/api/comments/{comment['id']}", headers=alice[1]).status_code == 404


class TestCommentLikes:

    def test_toggle(self, client, alice, bob):
        comment = post_comment(client, alice[1])
        url = f"/api/comments/{comment['id']}/like"
        assert client.post(url, headers=bob[1]).json()["data"] == {"isLiked": True, "likeCount": 1}
        assert client.post(url, headers=alice[1]).json()["data"] == {"isLiked": True, "likeCount": 2}
        assert client.post(url, headers=bob[1]).json()["data"] == {"isLiked": False, "likeCount": 1}

        listed = client.get("/api/comments/video/42").json()["data"][0]
        assert listed["likes"] == [alice[0]["id"]]

    def test_like_missing_comment(self, client, alice):
        assert client.post("/api/comments/999/like", headers=alice[1]).status_code == 404

    def test_count_never_goes_negative(self, db):
        user, _ = user_service.register_user(db, UserCreate(
            username="alice", email="alice@example.com", password="password123"
        ))
        comment = comment_service.create_comment(db, user, CommentCreate(text="Hi", videoId="1"))
        # Membership row without a matching count
        db.add(CommentLike(userId=user.id, commentId=comment.id))
        db.commit()

        is_liked, like_count = comment_service.toggle_comment_like(db, comment.id, user)
        assert is_liked is False
        assert like_count == 0


class TestListComments:

    def test_newest_first_for_matching_video(self, client, alice):
        first = post_comment(client, alice[1], video_id="42", text="one")
        second = post_comment(client, alice[1], video_id="42", text="two")
        post_comment(client, alice[1], video_id="43", text="elsewhere")

        body = client.get("/api/comments/video/42").json()
        assert body["success"] is True
        assert body["count"] == 2
        assert [c["id"] for c in body["data"]] == [second["id"], first["id"]]

    def test_hidden_comments_excluded(self, db):
        user, _ = user_service.register_user(db, UserCreate(
            username="alice", email="alice@example.com", password="password123"
        ))
        visible = comment_service.create_comment(db, user, CommentCreate(text="visible", videoId="5"))
        legacy = comment_service.create_comment(db, user, CommentCreate(text="legacy", videoId="5"))
        hidden = comment_service.create_comment(db, user, CommentCreate(text="hidden", videoId="5"))
        db.query(Comment).filter(Comment.id == legacy.id).update({Comment.isActive: None})
        db.query(Comment).filter(Comment.id == hidden.id).update({Comment.isActive: False})
        db.commit()

        listed = {c.id for c in comment_service.list_video_comments(db, "5")}
        assert listed == {visible.id, legacy.id}
