"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from forum.domain.model import Answer, Interaction, Question, User
from forum.domain.value import (
    AnswerId,
    InteractionAction,
    InteractionId,
    QuestionId,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return _uuid(value) if value is not None else None


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        clerk_id=row["clerk_id"],
        name=row["name"],
        username=row["username"],
        picture=row.get("picture"),
        reputation=row["reputation"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model."""
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        content=row.get("content") or "",
        author_id=UserId(_uuid(row["author_id"])),
        tags=list(row.get("tags") or []),
        answers=[AnswerId(_uuid(a)) for a in row.get("answer_ids") or []],
        created_at=row["created_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict.

    The ``answers`` field is stored in the ``answer_ids`` column.
    """
    data = question.model_dump(exclude={"answers"})
    data["answer_ids"] = list(question.answers)
    return data


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model."""
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        content=row["content"],
        author_id=UserId(_uuid(row["author_id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        upvotes=[UserId(_uuid(u)) for u in row.get("upvotes") or []],
        downvotes=[UserId(_uuid(u)) for u in row.get("downvotes") or []],
        created_at=row["created_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict."""
    return answer.model_dump()


def row_to_interaction(row: Dict[str, Any]) -> Interaction:
    """Convert database row to Interaction domain model."""
    return Interaction(
        id=InteractionId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        action=InteractionAction(row["action"]),
        question_id=_optional_uuid(row.get("question_id")),
        answer_id=_optional_uuid(row.get("answer_id")),
        tags=list(row.get("tags") or []),
        created_at=row["created_at"],
    )


def interaction_to_dict(interaction: Interaction) -> Dict[str, Any]:
    """Convert Interaction domain model to database dict."""
    data = interaction.model_dump()
    data["action"] = interaction.action.value
    return data
