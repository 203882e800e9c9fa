import os

import pytest

# 設定は import 時に読み込まれるので、アプリを読み込む前に環境変数を決めておく
os.environ.setdefault("SOLVE_DELAY_SECONDS", "0")
os.environ.setdefault("LOG_LEVEL", "WARNING")


@pytest.fixture(scope="module")
def app():
    """テスト用のアプリケーション"""
    from dost.main import app
    return app


@pytest.fixture(scope="module")
def client(app):
    """A test client for the app."""
    from fastapi.testclient import TestClient
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def png_bytes():
    """1x1 の PNG 画像"""
    import io
    from PIL import Image

    buffer = io.BytesIO()
    Image.new("RGB", (1, 1), color="white").save(buffer, format="PNG")
    return buffer.getvalue()
