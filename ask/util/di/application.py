"""Application layer DI providers."""

from dishka import Scope, provide

from ask.application.usecase.answer import (
    AcceptAnswerUseCase,
    CreateAnswerUseCase,
    DeleteAnswerUseCase,
    GetAnswerUseCase,
    ListAnswersUseCase,
    UpdateAnswerUseCase,
)
from ask.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from ask.application.usecase.comment import AddCommentUseCase, DeleteCommentUseCase
from ask.application.usecase.notification import (
    ListNotificationsUseCase,
    MarkNotificationReadUseCase,
)
from ask.application.usecase.question import (
    CreateQuestionUseCase,
    DeleteQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
    UpdateQuestionUseCase,
)
from ask.application.usecase.vote import VoteAnswerUseCase
from ask.config import NotificationSettings
from ask.domain.repository import UnitOfWork
from ask.domain.service import (
    AcceptanceService,
    AnswerService,
    JWTService,
    NotificationService,
    QuestionService,
    UserService,
    VoteService,
)
from ask.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_register_use_case(self, user_service: UserService) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(user_service=user_service)

    @provide
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(user_service=user_service)

    # Question use cases
    @provide
    def get_create_question_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(
            question_service=question_service, user_service=user_service
        )

    @provide
    def get_get_question_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(
            question_service=question_service, user_service=user_service
        )

    @provide
    def get_list_questions_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(
            question_service=question_service, user_service=user_service
        )

    @provide
    def get_update_question_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> UpdateQuestionUseCase:
        """Provide update question use case."""
        return UpdateQuestionUseCase(
            question_service=question_service, user_service=user_service
        )

    @provide
    def get_delete_question_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> DeleteQuestionUseCase:
        """Provide delete question use case."""
        return DeleteQuestionUseCase(
            question_service=question_service, user_service=user_service
        )

    # Answer use cases
    @provide
    def get_create_answer_use_case(
        self,
        answer_service: AnswerService,
        user_service: UserService,
        notification_service: NotificationService,
        unit_of_work: UnitOfWork,
    ) -> CreateAnswerUseCase:
        """Provide create answer use case."""
        return CreateAnswerUseCase(
            answer_service=answer_service,
            user_service=user_service,
            notification_service=notification_service,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_list_answers_use_case(
        self, answer_service: AnswerService, user_service: UserService
    ) -> ListAnswersUseCase:
        """Provide list answers use case."""
        return ListAnswersUseCase(answer_service=answer_service, user_service=user_service)

    @provide
    def get_get_answer_use_case(
        self, answer_service: AnswerService, user_service: UserService
    ) -> GetAnswerUseCase:
        """Provide get answer use case."""
        return GetAnswerUseCase(answer_service=answer_service, user_service=user_service)

    @provide
    def get_update_answer_use_case(
        self, answer_service: AnswerService, user_service: UserService
    ) -> UpdateAnswerUseCase:
        """Provide update answer use case."""
        return UpdateAnswerUseCase(
            answer_service=answer_service, user_service=user_service
        )

    @provide
    def get_delete_answer_use_case(
        self, answer_service: AnswerService, user_service: UserService
    ) -> DeleteAnswerUseCase:
        """Provide delete answer use case."""
        return DeleteAnswerUseCase(
            answer_service=answer_service, user_service=user_service
        )

    @provide
    def get_accept_answer_use_case(
        self, acceptance_service: AcceptanceService, user_service: UserService
    ) -> AcceptAnswerUseCase:
        """Provide accept answer use case."""
        return AcceptAnswerUseCase(
            acceptance_service=acceptance_service, user_service=user_service
        )

    # Vote use cases
    @provide
    def get_vote_answer_use_case(
        self, vote_service: VoteService, user_service: UserService
    ) -> VoteAnswerUseCase:
        """Provide vote use case."""
        return VoteAnswerUseCase(vote_service=vote_service, user_service=user_service)

    # Comment use cases
    @provide
    def get_add_comment_use_case(
        self,
        answer_service: AnswerService,
        user_service: UserService,
        notification_service: NotificationService,
        unit_of_work: UnitOfWork,
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(
            answer_service=answer_service,
            user_service=user_service,
            notification_service=notification_service,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_delete_comment_use_case(
        self, answer_service: AnswerService, user_service: UserService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            answer_service=answer_service, user_service=user_service
        )

    # Notification use cases
    @provide
    def get_list_notifications_use_case(
        self,
        notification_service: NotificationService,
        notification_settings: NotificationSettings,
        user_service: UserService,
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(
            notification_service=notification_service,
            notification_settings=notification_settings,
            user_service=user_service,
        )

    @provide
    def get_mark_notification_read_use_case(
        self, notification_service: NotificationService, user_service: UserService
    ) -> MarkNotificationReadUseCase:
        """Provide mark notification read use case."""
        return MarkNotificationReadUseCase(
            notification_service=notification_service, user_service=user_service
        )
