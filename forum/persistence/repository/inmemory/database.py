"""Shared in-memory state for the in-memory repositories."""

from forum.domain.model import Answer, Interaction, Question, User
from forum.domain.value import AnswerId, QuestionId, UserId


class InMemoryDatabase:
    """Collections shared by the in-memory repositories of one container.

    Domain models are immutable, so a shallow copy of each collection is a
    full snapshot.
    """

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.questions: dict[QuestionId, Question] = {}
        self.answers: dict[AnswerId, Answer] = {}
        self.interactions: list[Interaction] = []

    def snapshot(self) -> dict:
        """Capture the current state of every collection."""
        return {
            "users": dict(self.users),
            "questions": dict(self.questions),
            "answers": dict(self.answers),
            "interactions": list(self.interactions),
        }

    def restore(self, snapshot: dict) -> None:
        """Reset every collection to a previous snapshot."""
        self.users = dict(snapshot["users"])
        self.questions = dict(snapshot["questions"])
        self.answers = dict(snapshot["answers"])
        self.interactions = list(snapshot["interactions"])
