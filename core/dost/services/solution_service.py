import asyncio
import logging

from dost.core.errors import ProblemValidationError
from dost.models.solve import SolutionResult
from dost.services.providers import SolutionProvider

logger = logging.getLogger(__name__)

PROBLEM_REQUIRED_MESSAGE = "Problem text is required"


class SolutionService:
    """解答生成サービス"""

    def __init__(self, provider: SolutionProvider, delay_seconds: float = 1.5):
        self.provider = provider
        self.delay_seconds = delay_seconds

    def validate_problem(self, problem) -> str:
        """問題文が空でないことを確認する"""
        if not problem:
            raise ProblemValidationError(PROBLEM_REQUIRED_MESSAGE)
        return problem

    async def solve(self, problem_text: str) -> SolutionResult:
        """問題文から解答を生成し、推論 API の待ち時間を模擬してから返す"""
        result = self.provider.solve(problem_text)
        logger.info(
            "Generated solution with %s provider (chars=%d)", self.provider.name, len(result.content),
        )

        # 実際の推論呼び出しの遅延を模擬
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)
        return result
