import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from dost.core.config import get_settings
from dost.models.solve import ErrorResponse, SolveRequest, SolveResponse
from dost.services.providers import create_provider
from dost.services.solution_service import SolutionService

logger = logging.getLogger(__name__)

router = APIRouter()
settings = get_settings()
solution_service = SolutionService(
    create_provider(settings.SOLUTION_PROVIDER),
    delay_seconds=settings.SOLVE_DELAY_SECONDS,
)

@router.post(
    "/solve",
    response_model=SolveResponse,
    responses={400: {"model": ErrorResponse}, 405: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def solve(request: SolveRequest):
    """問題文に対するステップ形式の解答を返す"""
    # 検証エラーはアプリ側のハンドラで 400 に変換される
    problem = solution_service.validate_problem(request.problem)

    try:
        result = await solution_service.solve(problem)
    except Exception as e:
        logger.exception("Error generating solution")
        error = ErrorResponse(error="Failed to get solution", details=str(e))
        return JSONResponse(status_code=500, content=error.model_dump())

    return SolveResponse(solution=result.content)
