"""解答ページの送信フローを Python から扱うクライアント

状態は Idle（入力受付中）、Loading（リクエスト中）、Resolved（解答またはエラー）の 3 つ。
送信中は再送信できないので、同時に飛ぶリクエストは常に 1 つまで。
"""

import base64
import io
import logging
from enum import Enum
from typing import Callable, List, Optional, Union

import requests
from PIL import Image, UnidentifiedImageError

from dost.models.solve import ProblemSubmission, RequestError, SolutionResult

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:1234"
SOLVE_PATH = "/api/solve"
FAILED_MESSAGE = "Failed to get solution"


class SolveRequestFailed(Exception):
    """サーバーが 2xx 以外を返した"""


class ClientState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    RESOLVED = "resolved"


def image_bytes_to_data_url(data: bytes) -> str:
    """画像バイト列を base64 の data URL に変換する

    MIME タイプは Pillow が判別した画像形式から決める。画像として読めないものは
    ValueError（ファイル選択の image/* 制限に相当）。
    """
    try:
        with Image.open(io.BytesIO(data)) as image:
            image_format = image.format
    except UnidentifiedImageError as e:
        raise ValueError("File is not a supported image") from e

    mime_type = Image.MIME.get(image_format, f"image/{image_format.lower()}")
    encoded = base64.b64encode(data).decode()
    return f"data:{mime_type};base64,{encoded}"


def file_to_data_url(path: str) -> str:
    with open(path, "rb") as f:
        return image_bytes_to_data_url(f.read())


class SubmissionClient:
    """問題文（と任意の画像）を集めて /api/solve に送信し、結果を保持する"""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, session=None):
        self.base_url = base_url.rstrip("/")
        # requests.Session と同じ post() を持つものなら差し替え可能
        self.session = session or requests.Session()

        self.text = ""
        self.image_data_url: Optional[str] = None
        self.state = ClientState.IDLE
        self.solution: Optional[SolutionResult] = None
        self.error: Optional[RequestError] = None
        self._listeners: List[Callable[["SubmissionClient"], None]] = []

    # --- 入力 ---

    def set_text(self, text: str) -> None:
        self.text = text

    def attach_image(self, path: str) -> None:
        self.image_data_url = file_to_data_url(path)

    def attach_image_bytes(self, data: bytes) -> None:
        self.image_data_url = image_bytes_to_data_url(data)

    def remove_image(self) -> None:
        self.image_data_url = None

    # --- 状態 ---

    def on_change(self, listener: Callable[["SubmissionClient"], None]) -> None:
        """状態が変わるたびに呼ばれるリスナーを登録する"""
        self._listeners.append(listener)

    @property
    def is_loading(self) -> bool:
        return self.state is ClientState.LOADING

    @property
    def can_submit(self) -> bool:
        """送信ボタンが押せるかどうか"""
        return not self.is_loading and not self._build_submission().is_empty()

    @property
    def outcome(self) -> Optional[Union[SolutionResult, RequestError]]:
        if self.state is not ClientState.RESOLVED:
            return None
        return self.error or self.solution

    def _build_submission(self) -> ProblemSubmission:
        return ProblemSubmission(text=self.text, image_data_url=self.image_data_url)

    def _transition(self, state: ClientState) -> None:
        self.state = state
        for listener in self._listeners:
            listener(self)

    # --- 送信 ---

    def submit(self) -> Optional[Union[SolutionResult, RequestError]]:
        """入力を送信して結果を返す。送信できない状態なら何もせず None"""
        if not self.can_submit:
            return None

        submission = self._build_submission()
        self.error = None
        self._transition(ClientState.LOADING)

        try:
            response = self.session.post(
                f"{self.base_url}{SOLVE_PATH}",
                json=submission.to_request().model_dump(),
                headers={"Content-Type": "application/json"},
            )
            if not 200 <= response.status_code < 300:
                raise SolveRequestFailed(FAILED_MESSAGE)
            self.solution = SolutionResult(content=response.json()["solution"])
        except Exception as e:
            # 通信・応答形式のどんな失敗もエラー表示にする（再試行しない）
            logger.error("Solve request failed: %s", e)
            self.error = RequestError(message=str(e) or FAILED_MESSAGE)
        finally:
            self._transition(ClientState.RESOLVED)

        return self.outcome
