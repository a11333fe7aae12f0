"""Star use cases."""

from .star_article import StarArticleRequest, StarArticleResponse, StarArticleUseCase
from .unstar_article import UnstarArticleRequest, UnstarArticleUseCase

__all__ = [
    "StarArticleRequest",
    "StarArticleResponse",
    "StarArticleUseCase",
    "UnstarArticleRequest",
    "UnstarArticleUseCase",
]
