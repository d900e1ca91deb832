"""
Interactive loader for demo content.

Offers to seed a demo user plus the categories and posts from app.data.demo_data.
Existing rows (matched by email, category name or post title) are left alone,
so running it twice changes nothing.

Usage:
    python -m app.scripts.load_demo_data
"""

import logging
import math
import random
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from sqlalchemy.orm import Session, sessionmaker

from app.core.config import Settings, get_settings
from app.core.database import Base, SessionLocal, get_engine
from app.core.security import get_password_hasher
from app.data.demo_data import (
    DEMO_USER_EMAIL,
    DEMO_USER_PASSWORD,
    demo_categories,
    demo_posts,
)
from app.models.category import Category
from app.models.post import Post
from app.models.user import User

logger = logging.getLogger(__name__)

WORDS_PER_MINUTE = 200
PUBLISHED_WITHIN_DAYS = 15


def ask_question(question: str, input_func: Callable[[str], str] = input) -> str:
    """Prompt once and return the answer lower-cased"""
    return input_func(question).strip().lower()


def reading_time(content: str) -> int:
    """Minutes needed to read ``content`` at 200 words per minute"""
    return math.ceil(len(content.split()) / WORDS_PER_MINUTE)


def load_demo_data(db: Session, settings: Settings, rng: Optional[random.Random] = None) -> dict:
    """
    Insert the demo user, categories and posts that are not there yet.

    Returns counts of what was created. Raises on database errors; the caller
    owns rollback and closing the session.
    """
    rng = rng or random.Random()
    Base.metadata.create_all(bind=db.get_bind())
    created = {"users": 0, "categories": 0, "posts": 0}

    demo_user = db.query(User).filter(User.email == DEMO_USER_EMAIL).first()
    if demo_user is None:
        hasher = get_password_hasher(settings.BCRYPT_ROUNDS)
        demo_user = User(email=DEMO_USER_EMAIL,
                         hashed_password=hasher.hash(DEMO_USER_PASSWORD))
        db.add(demo_user)
        db.flush()
        created["users"] += 1
        logger.info(f"Created demo user: {demo_user.email}")

    for category_data in demo_categories:
        existing_category = db.query(Category).filter(
            Category.name == category_data["name"]
        ).first()
        if existing_category is None:
            db.add(Category(**category_data))
            created["categories"] += 1
    db.flush()
    logger.info(f"Loaded {len(demo_categories)} categories")

    categories_by_name = {c.name: c.id for c in db.query(Category).all()}

    now = datetime.now(timezone.utc)
    for post_data in demo_posts:
        existing_post = db.query(Post).filter(
            Post.title == post_data["title"]
        ).first()
        if existing_post is not None:
            continue

        fields = {k: v for k, v in post_data.items() if k != "category"}
        published_at = None
        if post_data["is_published"]:
            published_at = now - rng.random() * timedelta(days=PUBLISHED_WITHIN_DAYS)

        db.add(Post(
            **fields,
            author_id=demo_user.id,
            category_id=categories_by_name.get(post_data.get("category")),
            views_count=rng.randint(50, 549),
            likes_count=rng.randint(5, 54),
            reading_time=reading_time(post_data["content"]),
            published_at=published_at,
        ))
        created["posts"] += 1
    logger.info(f"Loaded {len(demo_posts)} demo posts")

    db.commit()
    return created


def run_demo_data_load(
    settings: Settings,
    session_factory: Optional[sessionmaker] = None,
) -> Optional[dict]:
    """Load demo data in a fresh session; errors are logged, not raised"""
    if session_factory is None:
        get_engine()
        session_factory = SessionLocal

    db = session_factory()
    try:
        created = load_demo_data(db, settings)
        logger.info("Demo data loaded successfully")
        return created
    except Exception as e:
        db.rollback()
        logger.error(f"Error loading demo data: {e!r}")
        return None
    finally:
        db.close()


def question_demo_data_loading(
    settings: Settings,
    input_func: Callable[[str], str] = input,
    session_factory: Optional[sessionmaker] = None,
) -> Optional[dict]:
    """Show the menu, then load or skip depending on the answer"""
    print("\nDemo Data Loading Options:")
    print("1. Load demo data for posts")
    print("2. Skip demo data")

    choice = ask_question("\nChoose an option: ", input_func)

    if choice == "1":
        return run_demo_data_load(settings, session_factory)
    if choice == "2":
        print("Skipping demo data...")
    else:
        print("Invalid choice, skipping demo data...")
    return None


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    question_demo_data_loading(settings)


if __name__ == "__main__":
    main()
