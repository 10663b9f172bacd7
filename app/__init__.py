"""Application layer: typed settings groups built on ``KeyedDefault``."""

from .user_repository import OnboardingSettings, SessionSettings, UserRepository

__all__ = ["UserRepository", "SessionSettings", "OnboardingSettings"]
