from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine


BASE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_DB_PATH = BASE_DIR / "data" / "blogsite.db"
DATABASE_PATH = Path(os.getenv("BLOGSITE_DB_PATH", str(DEFAULT_DB_PATH))).expanduser()


def build_engine(path: Path) -> Engine:
    return create_engine(f"sqlite:///{path}", connect_args={"check_same_thread": False})


engine = build_engine(DATABASE_PATH)


def init_db(target: Engine = engine) -> None:
    # Table models must be registered on the metadata before create_all.
    from blogsite.models import post  # noqa: F401

    if target.url.database:
        Path(target.url.database).parent.mkdir(parents=True, exist_ok=True)
    SQLModel.metadata.create_all(target)


def get_session() -> Iterator[Session]:
    with Session(engine) as session:
        yield session
