from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from sqlmodel import Session

BASE_DIR = Path(__file__).resolve().parent.parent

sys.path.insert(0, str(BASE_DIR))

from blogsite.database import DATABASE_PATH, build_engine, init_db
from blogsite.services.blog_service import BlogService
from blogsite.services.post_importer import import_directory


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Import markdown posts with front matter into the blog database.")
    parser.add_argument("directory", type=Path, help="Directory scanned recursively for *.md files.")
    parser.add_argument("--db-path", type=Path, default=DATABASE_PATH, help="SQLite database file to write to.")
    return parser.parse_args()


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    args = parse_args()

    engine = build_engine(args.db_path.expanduser())
    init_db(engine)
    with Session(engine) as session:
        posts = import_directory(BlogService(session), args.directory)

    print(f"Imported {len(posts)} posts into {args.db_path}")


if __name__ == "__main__":
    main()
