from datetime import datetime, timezone

import pytest
from sqlmodel import Session, SQLModel, create_engine

from blogsite.models.post import PostCategory, PostForm, PostStatus, as_utc
from blogsite.services.blog_service import BlogService, NoSuchBlogPostError


def build_session():
    engine = create_engine("sqlite://")
    SQLModel.metadata.create_all(engine)
    return Session(engine)


def test_add_post_renders_markdown_and_summary():
    with build_session() as session:
        service = BlogService(session)
        post = service.add_post(
            PostForm(title="  Spring 4 GA  ", content="First *paragraph*.\n\nSecond paragraph.", author="Juergen")
        )

        assert post.id is not None
        assert post.title == "Spring 4 GA"
        assert post.rendered_content == "<p>First <em>paragraph</em>.</p>\n<p>Second paragraph.</p>\n"
        assert post.rendered_summary == "<p>First <em>paragraph</em>.</p>"
        assert post.status is PostStatus.PUBLISHED
        assert service.get_published_post(post.id) == post


def test_add_post_keeps_drafts_out_of_listings():
    with build_session() as session:
        service = BlogService(session)
        post = service.add_post(PostForm(title="Draft", content="Not yet", draft=True))

        assert post.status is PostStatus.DRAFT
        with pytest.raises(NoSuchBlogPostError):
            service.get_published_post(post.id)


@pytest.mark.parametrize(
    "title, content",
    [("", "Body"), ("   ", "Body"), ("Title", "   "), ("x" * 201, "Body")],
)
def test_add_post_validates_input(title, content):
    with build_session() as session:
        with pytest.raises(ValueError):
            BlogService(session).add_post(PostForm(title=title, content=content))


def test_update_post_rerenders_content():
    with build_session() as session:
        service = BlogService(session)
        post = service.add_post(PostForm(title="Original", content="Old body", draft=True))

        publish_at = datetime(2013, 6, 1, 9, 30, tzinfo=timezone.utc)
        updated = service.update_post(
            post.id,
            PostForm(
                title="Updated",
                content="New body",
                category=PostCategory.RELEASES,
                broadcast=True,
                publish_at=publish_at,
            ),
        )

        assert updated.title == "Updated"
        assert updated.rendered_content == "<p>New body</p>\n"
        assert updated.category is PostCategory.RELEASES
        assert updated.broadcast is True
        assert updated.draft is False
        assert as_utc(updated.publish_at) == publish_at


def test_update_missing_post_raises():
    with build_session() as session:
        with pytest.raises(NoSuchBlogPostError):
            BlogService(session).update_post(42, PostForm(title="Title", content="Body"))


def test_delete_post_removes_it():
    with build_session() as session:
        service = BlogService(session)
        post = service.add_post(PostForm(title="Gone soon", content="Body"))
        post_id = post.id

        service.delete_post(post_id)

        with pytest.raises(NoSuchBlogPostError):
            service.get_post(post_id)
        with pytest.raises(NoSuchBlogPostError):
            service.delete_post(post_id)


def test_add_post_stores_publish_time_as_utc():
    with build_session() as session:
        service = BlogService(session)
        naive = service.add_post(PostForm(title="Naive", content="Body", publish_at=datetime(2013, 1, 1, 8, 0)))
        offset = service.add_post(
            PostForm(
                title="Offset",
                content="Body",
                publish_at=datetime.fromisoformat("2013-01-01T10:00:00+02:00"),
            )
        )

        expected = datetime(2013, 1, 1, 8, 0, tzinfo=timezone.utc)
        assert as_utc(naive.publish_at) == expected
        assert as_utc(offset.publish_at) == expected


def test_update_post_without_publish_time_keeps_existing_one():
    with build_session() as session:
        service = BlogService(session)
        publish_at = datetime(2013, 6, 1, 9, 30, tzinfo=timezone.utc)
        post = service.add_post(PostForm(title="Original", content="Body", publish_at=publish_at))

        updated = service.update_post(post.id, PostForm(title="Renamed", content="Body"))

        assert as_utc(updated.publish_at) == publish_at
