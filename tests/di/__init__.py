"""Mock providers for testing."""

from .persistence import MockPersistenceProvider
from .thirdparty import MockThirdPartyProvider
from .container import build_test_container

__all__ = [
    "MockPersistenceProvider",
    "MockThirdPartyProvider",
    "build_test_container",
]
