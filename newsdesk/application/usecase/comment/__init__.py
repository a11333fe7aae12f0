"""Comment use cases."""

from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .create_reply import CreateReplyRequest, CreateReplyUseCase

__all__ = [
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "CreateReplyRequest",
    "CreateReplyUseCase",
]
