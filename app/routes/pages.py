from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.orm import Session

from app.core.dependencies import AuthContext, get_auth_context, require_auth
from app.core.templates import templates
from app.db.crud.articles import get_recent_articles
from app.db.crud.colleges import list_colleges
from app.db.crud.users import get_user_by_id
from app.db.session import get_db

router = APIRouter(tags=["pages"])

def render(request: Request, template: str, title: str, **context):
    return templates.TemplateResponse(request, template, {"title": title, **context})

# -------------------------------------------------
# PUBLIC (redirect to dashboard when signed in)
# -------------------------------------------------
@router.get("/", response_class=HTMLResponse)
def home(request: Request, auth: Optional[AuthContext] = Depends(get_auth_context)):
    if auth:
        return RedirectResponse("/dashboard", status_code=302)
    return render(request, "index.html", "MBA Aspirant Portal")

@router.get("/login", response_class=HTMLResponse)
def login_page(request: Request, auth: Optional[AuthContext] = Depends(get_auth_context)):
    if auth:
        return RedirectResponse("/dashboard", status_code=302)
    return render(request, "login.html", "Login - MBA Portal")

# -------------------------------------------------
# PROTECTED
# -------------------------------------------------
@router.get("/dashboard", response_class=HTMLResponse)
def dashboard(request: Request, auth: AuthContext = Depends(require_auth), db: Session = Depends(get_db)):
    user = get_user_by_id(db, auth.user_id)
    return render(request, "dashboard.html", "Dashboard - MBA Portal", user=user)

@router.get("/profile", response_class=HTMLResponse)
def profile(request: Request, auth: AuthContext = Depends(require_auth), db: Session = Depends(get_db)):
    user = get_user_by_id(db, auth.user_id)
    return render(request, "profile.html", "My Profile - MBA Portal", user=user)

@router.get("/complete-profile", response_class=HTMLResponse)
def complete_profile_page(request: Request, auth: AuthContext = Depends(require_auth), db: Session = Depends(get_db)):
    return render(
        request,
        "complete_profile.html",
        "Complete Your Profile - MBA Portal",
        user=get_user_by_id(db, auth.user_id),
        colleges=list_colleges(db),
    )

@router.get("/news", response_class=HTMLResponse)
def news_page(request: Request, auth: AuthContext = Depends(require_auth), db: Session = Depends(get_db)):
    return render(request, "news.html", "News - MBA Portal", articles=get_recent_articles(db, limit=50))

@router.get("/colleges", response_class=HTMLResponse)
def colleges_page(request: Request, auth: AuthContext = Depends(require_auth), db: Session = Depends(get_db)):
    return render(request, "colleges.html", "Colleges - MBA Portal", colleges=list_colleges(db))

# -------------------------------------------------
# PUBLIC CONTENT
# -------------------------------------------------
@router.get("/gd-war-room", response_class=HTMLResponse)
def gd_war_room(request: Request):
    return render(request, "gd_war_room.html", "GD/PI War Room - MBA Portal")

@router.get("/experiences", response_class=HTMLResponse)
def experiences(request: Request):
    return render(request, "experiences.html", "Interview Experiences - MBA Portal")

@router.get("/roi-calculator", response_class=HTMLResponse)
def roi_calculator(request: Request):
    return render(request, "roi_calculator.html", "ROI Calculator - MBA Portal")
