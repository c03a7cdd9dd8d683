"""
Routes for the server‑rendered pages.

Pages are Jinja2 templates from ``app/templates`` rendered through
``Jinja2Templates``, which escapes every interpolated value.

``POST /submit`` is the form endpoint used by the HTML page.  It
applies the form rules (password required and confirmed, terms
accepted) and stores the submission in the same store as the JSON API,
answering with an HTML page instead of an envelope.
"""

from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from registration_app.app.api.deps import get_submission_service
from registration_app.app.core.errors import SubmissionValidationError
from registration_app.app.services.submission_service import SubmissionService
from registration_app.app.services.validation_service import PASSWORD_RULES, password_rule_checks

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter()

COUNTRIES = ("USA", "UK", "Canada", "Australia", "Germany", "France", "India", "Other")
GENDERS = (("male", "Male"), ("female", "Female"), ("other", "Other"))
INTERESTS = ("technology", "sports", "music", "travel", "reading", "art")

# Form field name -> service field name.
FORM_FIELDS = {
    "firstName": "first_name",
    "lastName": "last_name",
    "email": "email",
    "phone": "phone",
    "password": "password",
    "confirmPassword": "confirm_password",
    "age": "age",
    "country": "country",
    "gender": "gender",
    "bio": "bio",
    "terms": "terms",
}


@router.get("/", response_class=HTMLResponse)
async def registration_form(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(
        request=request,
        name="form.html",
        context={
            "countries": COUNTRIES,
            "genders": GENDERS,
            "interests": INTERESTS,
            "password_rules": list(PASSWORD_RULES.values()),
        },
    )


@router.get("/views/terms.html", response_class=HTMLResponse)
async def terms_page(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(request=request, name="terms.html")


@router.post("/submit", response_class=HTMLResponse)
async def submit_form(
    request: Request,
    service: SubmissionService = Depends(get_submission_service),
) -> HTMLResponse:
    """Handle the registration form and render the outcome.

    Validation failures are answered with 200 and the error page; when
    the password rule failed the page also lists each password rule
    and whether it passed.
    """
    form = await request.form()
    data = {name: form.get(field) for field, name in FORM_FIELDS.items()}
    data["interests"] = form.getlist("interests")
    try:
        submission = service.register_from_form(data)
    except SubmissionValidationError as exc:
        checks = []
        if "Password does not meet security requirements" in exc.errors:
            results = password_rule_checks(data["password"])
            checks = [(label, results[rule_id]) for rule_id, label in PASSWORD_RULES.items()]
        return templates.TemplateResponse(
            request=request,
            name="error.html",
            context={"errors": exc.errors, "password_checks": checks},
        )
    return templates.TemplateResponse(request=request, name="success.html", context={"submission": submission})
