from __future__ import annotations

from typing import List, Optional

from sqlalchemy import func
from sqlmodel import Session, col, select

from blogsite.models.pagination import PageRequest
from blogsite.models.post import Post, PostCategory


def _is_published():
    return Post.draft == False  # noqa: E712


def _is_broadcast():
    return Post.broadcast == True  # noqa: E712


def _published():
    return select(Post).where(_is_published())


def _most_recent_first(statement):
    return statement.order_by(col(Post.publish_at).desc(), col(Post.id).desc())


def _page(statement, page_request: PageRequest):
    return statement.offset(page_request.offset).limit(page_request.size)


def find_by_id(session: Session, post_id: int) -> Optional[Post]:
    return session.get(Post, post_id)


def find_published_by_id(session: Session, post_id: int) -> Optional[Post]:
    statement = _published().where(Post.id == post_id)
    return session.exec(statement).first()


def find_published(
    session: Session, page_request: PageRequest, category: Optional[PostCategory] = None
) -> List[Post]:
    statement = _published()
    if category is not None:
        statement = statement.where(Post.category == category)
    statement = _page(_most_recent_first(statement), page_request)
    return list(session.exec(statement))


def find_broadcast(session: Session, page_request: PageRequest) -> List[Post]:
    statement = _published().where(_is_broadcast())
    statement = _page(_most_recent_first(statement), page_request)
    return list(session.exec(statement))


def find_all(session: Session, page_request: PageRequest) -> List[Post]:
    statement = _page(select(Post).order_by(col(Post.id).asc()), page_request)
    return list(session.exec(statement))


def count_published(session: Session, category: Optional[PostCategory] = None) -> int:
    statement = select(func.count()).select_from(Post).where(_is_published())
    if category is not None:
        statement = statement.where(Post.category == category)
    return session.exec(statement).one()


def count_broadcast(session: Session) -> int:
    statement = (
        select(func.count())
        .select_from(Post)
        .where(_is_published(), _is_broadcast())
    )
    return session.exec(statement).one()


def count_all(session: Session) -> int:
    statement = select(func.count()).select_from(Post)
    return session.exec(statement).one()


def save_post(session: Session, post: Post) -> Post:
    session.add(post)
    session.commit()
    session.refresh(post)
    return post


def delete_post(session: Session, post: Post) -> None:
    session.delete(post)
    session.commit()
