import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# uvicorn 系ロガーはハンドラを uvicorn 側で持つのでレベルだけ揃える
_CONFIGURED_LOGGERS = ["uvicorn", "uvicorn.error", "uvicorn.access", "fastapi", "dost"]


class _DostHandler(logging.StreamHandler):
    """setup_logging が追加したハンドラの目印"""


def setup_logging(level: str = "INFO") -> None:
    """ルートロガーに共通フォーマットのハンドラを設定する（再読み込みしても重複しない）"""
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    if not any(isinstance(h, _DostHandler) for h in root_logger.handlers):
        handler = _DostHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(handler)

    for logger_name in _CONFIGURED_LOGGERS:
        logging.getLogger(logger_name).setLevel(numeric_level)
