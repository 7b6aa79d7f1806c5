"""
FakeQL
GraphQL API over a generated Users, Albums and Photos dataset
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
