import os
from datetime import date

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

router = APIRouter()

TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "..", "..", "templates")
templates = Jinja2Templates(directory=TEMPLATES_DIR)

FEATURES = [
    {
        "icon": "🧠",
        "title": "AI that understands JEE patterns",
        "description": "Trained on 10,000+ JEE problems to provide exam-specific solutions",
    },
    {
        "icon": "📸",
        "title": "Scan handwritten problems",
        "description": "Upload photos of your notebook and get instant solutions",
    },
    {
        "icon": "📊",
        "title": "Weakness tracker",
        "description": "Get personalized insights on topics you need to improve",
    },
]

@router.get("/", response_class=HTMLResponse)
async def landing(request: Request):
    """ランディングページ"""
    return templates.TemplateResponse(
        request,
        "index.html",
        {"features": FEATURES, "year": date.today().year},
    )

@router.get("/solve", response_class=HTMLResponse)
async def solve_page(request: Request):
    """問題入力ページ（送信処理はページ内スクリプトが /api/solve を呼ぶ）"""
    return templates.TemplateResponse(request, "solve.html", {"year": date.today().year})
