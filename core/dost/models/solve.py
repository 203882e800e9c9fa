from pydantic import BaseModel
from typing import List, Optional

class SolveRequest(BaseModel):
    problem: Optional[str] = None

class SolveResponse(BaseModel):
    solution: str

class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None

class ProblemSubmission(BaseModel):
    """クライアント側で組み立てる 1 回分の投稿"""
    text: str = ""
    image_data_url: Optional[str] = None

    def is_empty(self) -> bool:
        return not self.text.strip() and not self.image_data_url

    def to_request(self) -> SolveRequest:
        # 画像はまだサーバーへ送らない
        return SolveRequest(problem=self.text)

class SolutionResult(BaseModel):
    content: str

    def paragraphs(self) -> List[str]:
        """解答ページと同じく改行ごとに段落へ分割する"""
        return self.content.split("\n")

class RequestError(BaseModel):
    message: str
