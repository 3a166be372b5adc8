"""Domain layer DI providers."""

from dishka import Scope, provide

from ask.config import AuthSettings, ContentSettings
from ask.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
    UnitOfWork,
    UserRepository,
)
from ask.domain.service import (
    AcceptanceService,
    AnswerService,
    JWTService,
    MentionService,
    NotificationService,
    QuestionService,
    UserService,
    VoteService,
)
from ask.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Services are REQUEST-scoped so they share the request's repositories
    and session.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository, auth_settings=auth_settings)

    @provide
    def get_question_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository,
            answer_repository=answer_repository,
        )

    @provide
    def get_answer_service(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        content_settings: ContentSettings,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository,
            question_repository=question_repository,
            content_settings=content_settings,
        )

    @provide
    def get_vote_service(self, answer_service: AnswerService) -> VoteService:
        """Provide vote ledger."""
        return VoteService(answer_service=answer_service)

    @provide
    def get_acceptance_service(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
    ) -> AcceptanceService:
        """Provide acceptance coordinator."""
        return AcceptanceService(
            answer_repository=answer_repository,
            question_repository=question_repository,
        )

    @provide
    def get_mention_service(self, user_repository: UserRepository) -> MentionService:
        """Provide mention scanner."""
        return MentionService(user_repository=user_repository)

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        mention_service: MentionService,
        unit_of_work: UnitOfWork,
    ) -> NotificationService:
        """Provide notification dispatcher."""
        return NotificationService(
            notification_repository=notification_repository,
            mention_service=mention_service,
            unit_of_work=unit_of_work,
        )
