import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from dost.api.endpoints import pages, solve
from dost.core.config import get_settings
from dost.core.errors import SolveError
from dost.core.logger import setup_logging
from dost.models.solve import ErrorResponse
from dost.services.solution_service import PROBLEM_REQUIRED_MESSAGE

settings = get_settings()
setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# FastAPIアプリケーションの初期化
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="JEE 問題のステップ解答（モック）を返すコアサービス",
    version=settings.VERSION
)

# CORS設定
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

def _error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    content = ErrorResponse(error=message).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=content, headers=headers)

# エラーはすべて {"error": ...} 形式で返す
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = "Method not allowed" if exc.status_code == 405 else str(exc.detail)
    return _error_response(exc.status_code, message, getattr(exc, "headers", None))

SOLVE_ROUTE_PATH = "/api/solve"
INVALID_REQUEST_MESSAGE = "Invalid request"

def validation_message(path: str) -> str:
    """リクエスト検証エラー時に返すメッセージ"""
    # /api/solve では本文が JSON オブジェクトでない・problem が文字列でない場合も問題文なしとして扱う
    if path == SOLVE_ROUTE_PATH:
        return PROBLEM_REQUIRED_MESSAGE
    return INVALID_REQUEST_MESSAGE

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning("Rejected %s request to %s: %s", request.method, request.url.path, exc.errors())
    return _error_response(400, validation_message(request.url.path))

@app.exception_handler(SolveError)
async def solve_error_handler(request: Request, exc: SolveError):
    logger.warning("Rejected %s request to %s: %s", request.method, request.url.path, exc.message)
    return _error_response(exc.status_code, exc.message)

# ルーターの登録
app.include_router(pages.router, tags=["pages"])
app.include_router(solve.router, prefix="/api", tags=["solve"])

@app.get("/health")
async def health():
    return {
        "status": "ok",
        "message": "IITian Dost Core API Server is running",
        "service": "dost-core",
        "version": settings.VERSION
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
