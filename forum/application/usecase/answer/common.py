"""Response items shared by the answer use cases."""

from datetime import datetime

from pydantic import BaseModel

from forum.domain.model import Answer, AuthorSummary


class AuthorItem(BaseModel):
    """Author projection in responses."""

    user_id: str
    clerk_id: str
    name: str
    picture: str | None


class AnswerItem(BaseModel):
    """Answer in responses."""

    answer_id: str
    question_id: str
    content: str
    author_id: str
    author: AuthorItem | None = None
    upvotes: list[str]
    downvotes: list[str]
    upvote_count: int
    downvote_count: int
    created_at: datetime


def answer_to_item(answer: Answer, author: AuthorSummary | None = None) -> AnswerItem:
    """Convert an answer (and optionally its author) to a response item."""
    return AnswerItem(
        answer_id=str(answer.id),
        question_id=str(answer.question_id),
        content=answer.content,
        author_id=str(answer.author_id),
        author=(
            AuthorItem(
                user_id=str(author.id),
                clerk_id=author.clerk_id,
                name=author.name,
                picture=author.picture,
            )
            if author
            else None
        ),
        upvotes=[str(u) for u in answer.upvotes],
        downvotes=[str(u) for u in answer.downvotes],
        upvote_count=answer.upvote_count,
        downvote_count=answer.downvote_count,
        created_at=answer.created_at,
    )
