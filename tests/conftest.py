"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

from forum.domain.model import Answer, Question, User
from forum.domain.value import AnswerId, QuestionId, UserId

BASE_TIME = datetime(2026, 1, 1, 12, 0, 0)


def make_user(name: str = "Ada", reputation: int = 0) -> User:
    """Build a user with unique external and username handles."""
    user_id = UserId(uuid4())
    suffix = str(user_id)[:8]
    return User(
        id=user_id,
        clerk_id=f"user_{suffix}",
        name=name,
        username=f"{name.lower()}_{suffix}",
        picture=f"https://img.example.com/{suffix}.png",
        reputation=reputation,
    )


def make_question(author_id: UserId, tags: list[str] | None = None) -> Question:
    """Build a question owned by ``author_id``."""
    return Question(
        id=QuestionId(uuid4()),
        title="How do I reverse a list?",
        content="Looking for the idiomatic way.",
        author_id=author_id,
        tags=tags if tags is not None else ["python"],
    )


def make_answer(
    question_id: QuestionId,
    author_id: UserId,
    upvotes: list[UserId] | None = None,
    downvotes: list[UserId] | None = None,
    minutes: int = 0,
) -> Answer:
    """Build an answer created ``minutes`` after BASE_TIME."""
    return Answer(
        id=AnswerId(uuid4()),
        content="Use reversed() or slicing.",
        author_id=author_id,
        question_id=question_id,
        upvotes=upvotes or [],
        downvotes=downvotes or [],
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )


def voters(count: int) -> list[UserId]:
    """Generate ``count`` distinct voter ids."""
    return [UserId(uuid4()) for _ in range(count)]
