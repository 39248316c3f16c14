import random
import logging
from sqlmodel import Session, SQLModel, select
from models import Author, Post
from dependencies import engine

logger = logging.getLogger(__name__)

# Data pools
FIRST_NAMES = [
    "Juan", "María", "Alberto", "Lucía", "Pedro", "Ana", "Carlos", "Sofia",
    "John", "Emma", "Michael", "Sarah", "David", "Isabella", "James", "Laura"
]

LAST_NAMES = [
    "Domínguez", "García", "Rodríguez", "López", "Martínez", "González",
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Miller", "Davis"
]

POST_TITLES = [
    "Getting started with FastAPI",
    "Why I moved my side project to Postgres",
    "Notes from a week of pair programming",
    "A gentle introduction to Docker",
    "Five things I wish I knew about SQL",
    "Writing tests you actually trust",
    "Shipping my first full-stack application",
    "How we review pull requests",
]

POST_DESCRIPTIONS = [
    "A short walkthrough of the tools and the mistakes along the way.",
    "What worked, what didn't, and what I would do differently next time.",
    "Some practical tips collected over the last few months.",
    "A summary of the talk, with links to the slides and the code.",
    "The setup I use every day and why it stuck.",
]


def create_authors(session: Session, count: int = 5) -> list[Author]:
    authors = []
    for _ in range(count):
        first, last = random.choice(FIRST_NAMES), random.choice(LAST_NAMES)
        author = Author(
            name=f"{first} {last}",
            email=f"{first.lower()}.{last.lower()}{random.randint(1, 999)}@example.com",
            bio=f"{first} writes about software.",
        )
        session.add(author)
        authors.append(author)
    session.commit()
    for author in authors:
        session.refresh(author)
    return authors


def create_posts(session: Session, authors: list[Author], count: int = 20) -> list[Post]:
    posts = []
    for _ in range(count):
        post = Post(
            title=random.choice(POST_TITLES),
            description=random.choice(POST_DESCRIPTIONS),
            author_id=random.choice(authors).id,
        )
        session.add(post)
        posts.append(post)
    session.commit()
    return posts


def create_test_data():
    with Session(engine) as session:
        # Skip seeding a database that already has content
        if session.exec(select(Post)).first():
            logger.info("Database already seeded, skipping test data")
            return

        authors = create_authors(session)
        posts = create_posts(session, authors)
        logger.info(f"Created {len(authors)} authors and {len(posts)} posts")


if __name__ == "__main__":
    SQLModel.metadata.create_all(engine)
    create_test_data()
