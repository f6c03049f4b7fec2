from __future__ import annotations

import logging
from typing import List, Optional

from sqlmodel import Session

from blogsite.models.pagination import PageRequest, PaginationInfo
from blogsite.models.post import Post, PostCategory, PostForm, as_utc
from blogsite.repositories import posts as post_repo
from blogsite.services.markdown_service import MarkdownService


logger = logging.getLogger(__name__)

MAX_TITLE_LENGTH = 200


class NoSuchBlogPostError(LookupError):
    def __init__(self, post_id: int) -> None:
        super().__init__(f"Blog post not found: {post_id}")
        self.post_id = post_id


class BlogService:
    """Queries and authoring operations over the post store."""

    def __init__(self, session: Session, renderer: Optional[MarkdownService] = None) -> None:
        self.session = session
        self.renderer = renderer or MarkdownService()

    def get_post(self, post_id: int) -> Post:
        post = post_repo.find_by_id(self.session, post_id)
        if post is None:
            raise NoSuchBlogPostError(post_id)
        return post

    def get_published_post(self, post_id: int) -> Post:
        post = post_repo.find_published_by_id(self.session, post_id)
        if post is None:
            raise NoSuchBlogPostError(post_id)
        return post

    def most_recent_posts(
        self, page_request: PageRequest, category: Optional[PostCategory] = None
    ) -> List[Post]:
        return post_repo.find_published(self.session, page_request, category)

    def most_recent_broadcast_posts(self, page_request: PageRequest) -> List[Post]:
        return post_repo.find_broadcast(self.session, page_request)

    def all_posts(self, page_request: PageRequest) -> List[Post]:
        return post_repo.find_all(self.session, page_request)

    def pagination_info(self, page_request: PageRequest, total_count: Optional[int] = None) -> PaginationInfo:
        """Current page and page count; defaults to counting published posts."""
        if total_count is None:
            total_count = post_repo.count_published(self.session)
        return PaginationInfo.for_page(page_request, total_count)

    def count_published(self, category: Optional[PostCategory] = None) -> int:
        return post_repo.count_published(self.session, category)

    def count_broadcast(self) -> int:
        return post_repo.count_broadcast(self.session)

    def count_all(self) -> int:
        return post_repo.count_all(self.session)

    def add_post(self, form: PostForm) -> Post:
        post = Post(title="")
        self._apply_form(post, form)
        post = post_repo.save_post(self.session, post)
        logger.info("Created post %s (%s)", post.id, post.status.value)
        return post

    def update_post(self, post_id: int, form: PostForm) -> Post:
        post = self.get_post(post_id)
        self._apply_form(post, form)
        post = post_repo.save_post(self.session, post)
        logger.info("Updated post %s", post.id)
        return post

    def delete_post(self, post_id: int) -> None:
        post = self.get_post(post_id)
        post_repo.delete_post(self.session, post)
        logger.info("Deleted post %s", post_id)

    def _apply_form(self, post: Post, form: PostForm) -> None:
        title = (form.title or "").strip()
        content = (form.content or "").strip()

        if not title:
            raise ValueError("Post title cannot be empty.")
        if len(title) > MAX_TITLE_LENGTH:
            raise ValueError("Post title is too long.")
        if not content:
            raise ValueError("Post content cannot be empty.")

        rendered = self.renderer.render(content)
        post.title = title
        post.author = (form.author or "").strip() or None
        post.raw_content = content
        post.rendered_content = rendered
        post.rendered_summary = self.renderer.summarize(rendered)
        post.category = form.category
        post.broadcast = form.broadcast
        post.draft = form.draft
        post.publish_at = as_utc(form.publish_at or post.publish_at)
