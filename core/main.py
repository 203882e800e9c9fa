import uvicorn

from dost.core.config import get_settings

# 実行方法: cd core && python main.py
if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run("dost.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
