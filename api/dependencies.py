# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-15
# Description: dependencies.py
# -----------------------------------------------------------------------------
from api.AppContainer import get_app_container
from services.HealthService import HealthService
from services.SemanticMemoryService import SemanticMemoryService


def get_health_service() -> HealthService:
    # use the singleton service from the container
    return get_app_container().health_service

def get_memory_service() -> SemanticMemoryService:
    # use the singleton service from the container
    return get_app_container().memory_service
