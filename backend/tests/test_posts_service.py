"""Tests for post service."""

import uuid
from datetime import UTC, datetime, timedelta

from devconnector.posts.models import Post
from devconnector.posts.service import create_post, delete_post, get_post_by_id, list_posts


class TestCreatePost:
    def test_snapshots_author(self, db_session, test_user):
        post = create_post(db_session, test_user, "Hello world")
        db_session.commit()
        assert post.user_id == test_user.id
        assert post.name == "Test User"
        assert post.avatar == test_user.avatar

    def test_snapshot_not_synced_with_later_edits(self, db_session, test_user):
        post = create_post(db_session, test_user, "Hello")
        db_session.commit()
        test_user.name = "Renamed"
        db_session.commit()
        db_session.refresh(post)
        assert post.name == "Test User"


class TestListPosts:
    def test_newest_first(self, db_session, test_user):
        base = datetime(2026, 5, 1, tzinfo=UTC)
        for label in ["old", "newest", "middle"]:
            offset = {"old": 0, "middle": 1, "newest": 2}[label]
            db_session.add(Post(user_id=test_user.id, text=label, date=base + timedelta(days=offset)))
        db_session.commit()

        assert [p.text for p in list_posts(db_session)] == ["newest", "middle", "old"]

    def test_empty(self, db_session):
        assert list_posts(db_session) == []


class TestGetAndDeletePost:
    def test_get_by_id(self, db_session, test_user):
        post = create_post(db_session, test_user, "Find me")
        db_session.commit()
        assert get_post_by_id(db_session, str(post.id)).text == "Find me"

    def test_invalid_or_missing_id(self, db_session):
        assert get_post_by_id(db_session, "bad-id") is None
        assert get_post_by_id(db_session, str(uuid.uuid4())) is None

    def test_delete(self, db_session, test_user):
        post = create_post(db_session, test_user, "Bye")
        db_session.commit()
        delete_post(db_session, post)
        db_session.commit()
        assert list_posts(db_session) == []
