"""Answer domain service."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from forum.config import ReputationSettings
from forum.domain.error import BusinessRuleViolationError, NotFoundError
from forum.domain.model import Answer, AuthorSummary
from forum.domain.repository import AnswerRepository
from forum.domain.value import AnswerId, AnswerSortOrder, QuestionId, UserId

from .base import Service
from .interaction_service import InteractionService
from .question_service import QuestionService
from .user_service import UserService


@dataclass
class AnswerWithAuthor:
    """Answer paired with its resolved author (None if the user is gone)."""

    answer: Answer
    author: AuthorSummary | None


@dataclass
class AnswerPage:
    """One page of a question's answers."""

    answers: list[AnswerWithAuthor]
    total: int
    is_next: bool


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_service: QuestionService,
        user_service: UserService,
        interaction_service: InteractionService,
        reputation_settings: ReputationSettings,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_service: Question domain service
            user_service: User domain service
            interaction_service: Interaction log service
            reputation_settings: Reputation rewards
        """
        self.answer_repository = answer_repository
        self.question_service = question_service
        self.user_service = user_service
        self.interaction_service = interaction_service
        self.reputation_settings = reputation_settings

    async def create_answer(
        self, content: str, author_id: UserId, question_id: QuestionId
    ) -> Answer:
        """Post an answer to a question.

        Steps:
        1. Verify question and author exist
        2. Insert the answer
        3. Append it to the question's answer list
        4. Log an interaction carrying the question's tags
        5. Reward the author

        Args:
            content: Answer body
            author_id: Author user ID
            question_id: Answered question

        Returns:
            Created answer

        Raises:
            BusinessRuleViolationError: If the content is blank
            NotFoundError: If the question or author does not exist
        """
        if not content.strip():
            raise BusinessRuleViolationError("Answer content cannot be blank")

        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question_id),
            author_id=str(author_id),
        ):
            question = await self.question_service.get_by_id(question_id)
            await self.user_service.get_by_id(author_id)

            answer = Answer(
                id=AnswerId(uuid4()),
                content=content,
                author_id=author_id,
                question_id=question_id,
                created_at=datetime.now(),
            )
            saved = await self.answer_repository.save(answer)

            await self.question_service.attach_answer(question.id, saved.id)
            await self.interaction_service.record_answer(author_id, question, saved.id)
            await self.user_service.adjust_reputation(
                author_id, self.reputation_settings.answer_created
            )

            logfire.info(
                "Answer created",
                answer_id=str(saved.id),
                question_id=str(question_id),
                author_id=str(author_id),
            )
            return saved

    async def get_answers(
        self,
        question_id: QuestionId,
        sort: Optional[AnswerSortOrder],
        page: int,
        page_size: int,
    ) -> AnswerPage:
        """Get one page of a question's answers with their authors.

        Args:
            question_id: Question ID
            sort: Sort order (None keeps insertion order)
            page: 1-based page number
            page_size: Answers per page

        Returns:
            Answer page; ``is_next`` tells whether later pages exist
        """
        with logfire.span(
            "answer_service.get_answers",
            question_id=str(question_id),
            sort=sort.value if sort else None,
            page=page,
            page_size=page_size,
        ):
            skip = (page - 1) * page_size

            answers = await self.answer_repository.find_by_question(
                question_id=question_id,
                sort=sort,
                limit=page_size,
                offset=skip,
            )
            total = await self.answer_repository.count_by_question(question_id)

            authors = await self.user_service.get_author_summaries(
                [answer.author_id for answer in answers]
            )

            logfire.info(
                "Answers retrieved",
                question_id=str(question_id),
                count=len(answers),
                total=total,
            )
            return AnswerPage(
                answers=[
                    AnswerWithAuthor(answer=answer, author=authors.get(answer.author_id))
                    for answer in answers
                ],
                total=total,
                is_next=total > skip + len(answers),
            )

    async def delete_answer(self, answer_id: AnswerId) -> Answer:
        """Delete an answer and everything that references it.

        Reputation earned by the answer is kept.

        Args:
            answer_id: Answer ID

        Returns:
            The deleted answer

        Raises:
            NotFoundError: If the answer does not exist
        """
        with logfire.span("answer_service.delete_answer", answer_id=str(answer_id)):
            answer = await self.answer_repository.find_by_id(answer_id, for_update=True)
            if not answer:
                logfire.warn("Delete of non-existent answer", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))

            await self.answer_repository.delete(answer_id)
            await self.question_service.detach_answer(answer.question_id, answer_id)
            await self.interaction_service.purge_for_answer(answer_id)

            logfire.info(
                "Answer deleted",
                answer_id=str(answer_id),
                question_id=str(answer.question_id),
            )
            return answer
