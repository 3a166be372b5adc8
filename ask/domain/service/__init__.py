"""Domain services."""

from .acceptance_service import AcceptanceService
from .answer_service import AnswerService
from .base import Service
from .jwt_service import JWTService
from .mention_service import MENTION_PATTERN, MentionService, extract_mentions
from .notification_service import NotificationService, question_link
from .question_service import QuestionService
from .user_service import UserService
from .vote_service import VoteService, tally_vote

__all__ = [
    "AcceptanceService",
    "AnswerService",
    "JWTService",
    "MENTION_PATTERN",
    "MentionService",
    "NotificationService",
    "QuestionService",
    "Service",
    "UserService",
    "VoteService",
    "extract_mentions",
    "question_link",
    "tally_vote",
]
