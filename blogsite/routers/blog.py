from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlmodel import Session, SQLModel

from blogsite.database import get_session
from blogsite.models.pagination import PageRequest, PaginationInfo, blog_posts_page_request
from blogsite.models.post import Post, PostCategory, PostForm
from blogsite.services.blog_service import BlogService, NoSuchBlogPostError


router = APIRouter()

MAX_PAGE = 100_000


class PostCreate(SQLModel):
    title: str
    content: str
    category: PostCategory = PostCategory.ENGINEERING
    broadcast: bool = False
    draft: bool = False
    author: Optional[str] = None
    publish_at: Optional[datetime] = None


def get_blog_service(session: Session = Depends(get_session)) -> BlogService:
    return BlogService(session)


def get_page_request(page: int = Query(1, ge=1, le=MAX_PAGE)) -> PageRequest:
    """Pages are one-based on the wire."""
    return blog_posts_page_request(page - 1)


def _listing(posts: List[Post], pagination: PaginationInfo) -> Dict[str, Any]:
    return {
        "posts": posts,
        "pagination": {
            "current_page": pagination.current_page,
            "total_pages": pagination.total_pages,
            "has_previous": pagination.has_previous,
            "has_next": pagination.has_next,
        },
    }


@router.get("/blog", name="blog_index")
def blog_index(
    page_request: PageRequest = Depends(get_page_request),
    service: BlogService = Depends(get_blog_service),
) -> Dict[str, Any]:
    posts = service.most_recent_posts(page_request)
    return _listing(posts, service.pagination_info(page_request))


@router.get("/blog/category/{category}", name="blog_category")
def blog_category(
    category: PostCategory,
    page_request: PageRequest = Depends(get_page_request),
    service: BlogService = Depends(get_blog_service),
) -> Dict[str, Any]:
    posts = service.most_recent_posts(page_request, category)
    pagination = service.pagination_info(page_request, service.count_published(category))
    return _listing(posts, pagination)


@router.get("/blog/broadcasts", name="blog_broadcasts")
def blog_broadcasts(
    page_request: PageRequest = Depends(get_page_request),
    service: BlogService = Depends(get_blog_service),
) -> Dict[str, Any]:
    posts = service.most_recent_broadcast_posts(page_request)
    pagination = service.pagination_info(page_request, service.count_broadcast())
    return _listing(posts, pagination)


@router.get("/blog/{post_id}", name="blog_post")
def blog_post(post_id: int, service: BlogService = Depends(get_blog_service)) -> Post:
    try:
        return service.get_published_post(post_id)
    except NoSuchBlogPostError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.get("/admin/blog", name="admin_blog_index")
def admin_blog_index(
    page_request: PageRequest = Depends(get_page_request),
    service: BlogService = Depends(get_blog_service),
) -> Dict[str, Any]:
    posts = service.all_posts(page_request)
    pagination = service.pagination_info(page_request, service.count_all())
    return _listing(posts, pagination)


@router.get("/admin/blog/{post_id}", name="admin_blog_post")
def admin_blog_post(post_id: int, service: BlogService = Depends(get_blog_service)) -> Post:
    try:
        return service.get_post(post_id)
    except NoSuchBlogPostError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.post("/admin/blog", name="admin_create_post", status_code=status.HTTP_201_CREATED)
def admin_create_post(payload: PostCreate, service: BlogService = Depends(get_blog_service)) -> Post:
    form = PostForm(
        title=payload.title,
        content=payload.content,
        category=payload.category,
        broadcast=payload.broadcast,
        draft=payload.draft,
        author=payload.author,
        publish_at=payload.publish_at,
    )
    try:
        return service.add_post(form)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
