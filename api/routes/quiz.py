"""Quiz session endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends

from api.dependencies import get_quiz_service
from api.models import AnswerRequest, CatalogResponse, QuizView, SessionSnapshot
from api.services.quiz_service import QuizService
from serialization import serialize_catalog

router = APIRouter(prefix="/api", tags=["quiz"])

Service = Annotated[QuizService, Depends(get_quiz_service)]


@router.get("/questions", response_model=CatalogResponse)
def list_questions(service: Service) -> dict[str, object]:
    """Return the full question catalog."""
    return serialize_catalog(service.session.catalog)


@router.get("/quiz", response_model=QuizView)
def get_quiz(service: Service) -> dict[str, object]:
    """Return what the quiz screen should render."""
    return service.view()


@router.post("/quiz/answer", response_model=QuizView)
def record_answer(payload: AnswerRequest, service: Service) -> dict[str, object]:
    """Record an answer for the current question."""
    return service.record_answer(payload.value)


@router.post("/quiz/advance", response_model=QuizView)
def advance(service: Service) -> dict[str, object]:
    """Move to the next question, or to the final screen."""
    return service.advance()


@router.post("/quiz/reset", response_model=QuizView)
def reset(service: Service) -> dict[str, object]:
    """Start the quiz over."""
    return service.reset()


@router.get("/quiz/state", response_model=SessionSnapshot)
def get_state(service: Service) -> dict[str, object]:
    """Export quiz progress."""
    return service.snapshot()


@router.put("/quiz/state", response_model=QuizView)
def put_state(payload: SessionSnapshot, service: Service) -> dict[str, object]:
    """Restore previously exported quiz progress."""
    return service.restore(payload.model_dump())
