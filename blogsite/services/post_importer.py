from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional

import frontmatter

from blogsite.models.post import Post, PostCategory, PostForm, as_utc
from blogsite.services.blog_service import BlogService


logger = logging.getLogger(__name__)


def import_directory(service: BlogService, directory: Path) -> List[Post]:
    """Create a post for every markdown file under ``directory``."""
    created: List[Post] = []
    if not directory.exists():
        logger.warning("Import directory does not exist: %s", directory)
        return created

    for path in sorted(directory.rglob("*.md")):
        try:
            form = load_form(path)
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("Failed to load post %s: %s", path, exc)
            continue

        if form is None:
            continue

        try:
            created.append(service.add_post(form))
        except ValueError as exc:
            logger.exception("Rejected post %s: %s", path, exc)
            continue

    logger.info("Imported %d posts from %s", len(created), directory)
    return created


def load_form(path: Path) -> Optional[PostForm]:
    parsed = frontmatter.load(path)
    meta = parsed.metadata or {}
    content = parsed.content.strip()

    if not content:
        logger.warning("Skipping empty post: %s", path)
        return None

    raw_category = meta.get("category")
    category = PostCategory.parse(str(raw_category)) if raw_category else PostCategory.ENGINEERING

    author = meta.get("author")
    return PostForm(
        title=str(meta.get("title") or _title_from_path(path)),
        content=content,
        category=category,
        broadcast=_parse_flag(meta.get("broadcast"), "broadcast"),
        draft=_parse_flag(meta.get("draft"), "draft"),
        author=str(author) if author else None,
        publish_at=_parse_date(meta.get("date")),
    )


def _title_from_path(path: Path) -> str:
    return path.stem.replace("-", " ").title()


_TRUE_WORDS = {"true", "yes", "on", "1"}
_FALSE_WORDS = {"false", "no", "off", "0", ""}


def _parse_flag(value, key: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_WORDS:
            return True
        if text in _FALSE_WORDS:
            return False
    raise ValueError(f"Front matter '{key}' is not a boolean: {value!r}")


def _parse_date(value) -> Optional[datetime]:
    """Parse a front matter date as UTC; naive values are taken to be UTC already."""
    if value is None:
        return None

    if isinstance(value, datetime):
        return as_utc(value)

    if isinstance(value, date):
        return as_utc(datetime.combine(value, datetime.min.time()))

    if isinstance(value, str):
        text = value.strip()
        for fmt in ("%Y-%m-%d", "%Y/%m/%d", "%Y-%m-%d %H:%M"):
            try:
                return as_utc(datetime.strptime(text, fmt))
            except ValueError:
                continue
        try:
            return as_utc(datetime.fromisoformat(text))
        except ValueError:
            logger.warning("Unrecognized date format '%s'", value)
            return None

    return None
