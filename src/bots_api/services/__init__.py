"""Registration, retrieval and stats services"""
from .registration_service import RegistrationService
from .retrieval_service import RetrievalService
from .stats_service import StatsService

__all__ = ["RegistrationService", "RetrievalService", "StatsService"]
