"""
Page orchestrator.

Top-level page flow: landing -> form -> results, with results -> form as the
only way back. Transitions are pure; submit_profile runs the one async step
(the search) between them.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

from backend.api.schemas import SearchResult, StudentProfile
from backend.flow.wizard import InvalidTransition, WizardState
from backend.utils.parser import parse_search_results
from backend.utils.query import build_search_query

logger = logging.getLogger(__name__)

SEARCH_ERROR_MESSAGE = "We couldn't reach the scholarship search. Please try again."

SearchFn = Callable[[str], Awaitable[dict[str, Any]]]


# States
class Landing(BaseModel):
    kind: Literal["landing"] = "landing"


class FormStep(BaseModel):
    kind: Literal["form"] = "form"
    wizard: WizardState = Field(default_factory=WizardState)
    loading: bool = False
    error: str | None = None


class ResultsStep(BaseModel):
    kind: Literal["results"] = "results"
    wizard: WizardState
    profile: StudentProfile
    results: list[SearchResult] = Field(default_factory=list)


PageState = Annotated[Landing | FormStep | ResultsStep, Field(discriminator="kind")]


# Events
class Start(BaseModel):
    kind: Literal["start"] = "start"


class SearchStarted(BaseModel):
    kind: Literal["search_started"] = "search_started"


class SearchSucceeded(BaseModel):
    kind: Literal["search_succeeded"] = "search_succeeded"
    profile: StudentProfile
    results: list[SearchResult] = Field(default_factory=list)


class SearchFailed(BaseModel):
    kind: Literal["search_failed"] = "search_failed"
    message: str | None = None


class Back(BaseModel):
    kind: Literal["back"] = "back"


PageEvent = Start | SearchStarted | SearchSucceeded | SearchFailed | Back


def transition(state: PageState, event: PageEvent) -> PageState:
    """Next page state. Raises InvalidTransition for pairs the flow does not allow."""
    if isinstance(state, Landing) and isinstance(event, Start):
        return FormStep()

    if isinstance(state, FormStep):
        if isinstance(event, SearchStarted):
            return state.model_copy(update={"loading": True, "error": None})
        if isinstance(event, SearchSucceeded):
            return ResultsStep(wizard=state.wizard, profile=event.profile, results=event.results)
        if isinstance(event, SearchFailed):
            return state.model_copy(update={"loading": False, "error": event.message})

    if isinstance(state, ResultsStep) and isinstance(event, Back):
        # Keep the wizard where it was, drop the results
        return FormStep(wizard=state.wizard)

    raise InvalidTransition(f"No transition from {state.kind} on {event.kind}")


async def submit_profile(
    state: FormStep,
    profile: StudentProfile,
    search: SearchFn,
    surface_errors: bool = False,
) -> PageState:
    """
    Search for the submitted profile and move to the results page.

    Args:
        state: Current form state
        profile: Validated profile from the wizard
        search: Sends a query and returns the JSON payload
        surface_errors: Put a message on the form when the search fails

    Returns:
        ResultsStep on success, FormStep (loading cleared) on failure
    """
    state = transition(state, SearchStarted())

    try:
        payload = await search(build_search_query(profile))
        results = parse_search_results(payload.get("results") or [])
    except Exception as e:
        logger.error(f"Error fetching scholarships: {e}")
        message = SEARCH_ERROR_MESSAGE if surface_errors else None
        return transition(state, SearchFailed(message=message))

    return transition(state, SearchSucceeded(profile=profile, results=results))
