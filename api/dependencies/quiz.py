"""Quiz session dependencies for FastAPI."""
from functools import lru_cache

from api import config
from api.services.quiz_service import QuizService, load_catalog


@lru_cache(maxsize=1)
def get_quiz_service() -> QuizService:
    """Get the process-wide quiz service, created on first use."""
    return QuizService(load_catalog(config.CATALOG_FILE))
