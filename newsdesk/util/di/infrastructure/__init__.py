"""Infrastructure providers."""

# Import bases
from .persistence import PersistenceProvider
from .thirdparty import ThirdPartyProvider

# Import implementations (needed for __subclasses__())
from .persistence import ProdPersistenceProvider  # noqa: F401
from .thirdparty import ProdThirdPartyProvider  # noqa: F401

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
    "ProdThirdPartyProvider",
    "ThirdPartyProvider",
]
