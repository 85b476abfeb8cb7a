"""値オブジェクトモジュール."""
from .cancellation import Cancellation
from .deletion_eligibility import DeletionEligibility
from .email import Email
from .participated_event import ParticipatedEvent

__all__ = [
    "Cancellation",
    "DeletionEligibility",
    "Email",
    "ParticipatedEvent",
]
