"""
Server-rendered pages.

The page and wizard state travel with each form post (step plus every
profile field), so the server keeps nothing between requests.
"""

from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError
from starlette.datastructures import FormData

from backend.api.routes.search import get_search_client
from backend.api.schemas import ProfileDraft
from backend.config import settings
from backend.flow import wizard
from backend.flow.fields import FORM_FIELDS, STEP_TITLES, TOTAL_STEPS, fields_for_step
from backend.flow.page import (
    Back,
    FormStep,
    Landing,
    ResultsStep,
    Start,
    submit_profile,
    transition,
)
from backend.tools.tavily_search import TavilySearchClient, search_scholarships
from backend.views.results import EMPTY_MESSAGE, EMPTY_TITLE, build_results_view

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=TEMPLATES_DIR)

router = APIRouter()


def wizard_from_form(form: FormData) -> wizard.WizardState:
    """Rebuild the wizard state posted back by a rendered page."""
    values = {f.alias: form[f.alias] for f in FORM_FIELDS if f.alias in form}
    step = 2 if form.get("step") == "2" else 1
    return wizard.WizardState(step=step, draft=ProfileDraft.model_validate(values))


def render(request: Request, state):
    """Render whichever page the state is on."""
    if isinstance(state, Landing):
        return templates.TemplateResponse(request, "landing.html", {})

    if isinstance(state, FormStep):
        step = state.wizard.step
        return templates.TemplateResponse(
            request,
            "form.html",
            {
                "state": state,
                "draft": state.wizard.draft,
                "errors": state.wizard.errors,
                "step": step,
                "total_steps": TOTAL_STEPS,
                "step_title": STEP_TITLES[step],
                "visible_fields": fields_for_step(step),
                "hidden_fields": [f for f in FORM_FIELDS if f.step != step],
            },
        )

    view = build_results_view(state.results, state.profile)
    return templates.TemplateResponse(
        request,
        "results.html",
        {
            "view": view,
            "draft": state.wizard.draft,
            "step": state.wizard.step,
            "fields": FORM_FIELDS,
            "empty_title": EMPTY_TITLE,
            "empty_message": EMPTY_MESSAGE,
        },
    )


@router.get("/")
def landing(request: Request):
    """Landing page."""
    return render(request, Landing())


@router.post("/start")
def start(request: Request):
    """Open the form on step 1."""
    return render(request, transition(Landing(), Start()))


@router.post("/form")
async def form_action(
    request: Request,
    client: TavilySearchClient = Depends(get_search_client),
):
    """Apply a wizard action (next, previous or submit)."""
    form = await request.form()
    action = form.get("action")
    state = FormStep(wizard=wizard_from_form(form))

    if action == "next":
        return render(request, state.model_copy(update={"wizard": wizard.next_step(state.wizard)}))

    if action == "previous":
        return render(
            request, state.model_copy(update={"wizard": wizard.previous_step(state.wizard)})
        )

    if action != "submit":
        raise HTTPException(status_code=400, detail=f"Unknown action: {action}")

    checked, profile = wizard.submit(state.wizard)
    state = state.model_copy(update={"wizard": checked})
    if profile is None:
        return render(request, state)

    async def search(query: str) -> dict:
        result = await search_scholarships(query, client)
        return result.body

    state = await submit_profile(
        state, profile, search, surface_errors=settings.surface_search_errors
    )
    return render(request, state)


@router.post("/back")
async def back(request: Request):
    """Return from results to the form, keeping the entered profile."""
    form = await request.form()
    current = wizard_from_form(form)
    try:
        profile = current.draft.to_profile()
    except ValidationError:
        raise HTTPException(status_code=400, detail="Incomplete profile")

    return render(request, transition(ResultsStep(wizard=current, profile=profile), Back()))
