"""
Page routes - Registration form rendering and submission.

This module defines the HTML endpoints:
- GET /register - Render the empty form
- POST /register - Run one submit attempt and render the result
"""

from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from src.api.dependencies import get_submission_controller
from src.domain.submission import SubmissionController

router = APIRouter(tags=["register"])

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


@router.get(
    "/register",
    response_class=HTMLResponse,
    summary="Registration form",
)
async def register_page(
    request: Request,
    controller: SubmissionController = Depends(get_submission_controller),
) -> HTMLResponse:
    """Render the registration form in its initial state."""
    return templates.TemplateResponse(request, "register.html", {"view": controller.view()})


@router.post(
    "/register",
    response_class=HTMLResponse,
    summary="Submit registration form",
)
async def register_submit(
    request: Request,
    first_name: str = Form("", alias="firstName"),
    last_name: str = Form("", alias="lastName"),
    email: str = Form(""),
    password: str = Form(""),
    confirm_password: str = Form("", alias="confirmPassword"),
    controller: SubmissionController = Depends(get_submission_controller),
) -> HTMLResponse:
    """
    Run one submit attempt with the posted field values.

    Field errors, server rejections and transport faults all render the
    form again with the matching messages; the response is always 200.
    """
    controller.fill(
        first_name=first_name,
        last_name=last_name,
        email=email,
        password=password,
        confirm_password=confirm_password,
    )
    try:
        await controller.submit()
        view = controller.view()
    finally:
        controller.close()
    return templates.TemplateResponse(request, "register.html", {"view": view})
