"""
Form wizard.

Two-step profile form as pure transitions over WizardState:
- edit: change one field and clear its error
- next_step: check the current step's required fields, then advance
- previous_step: go back without checks
- submit: validate the whole profile (last step only)
"""

from typing import Literal

from pydantic import BaseModel, Field, ValidationError

from backend.api.schemas import ProfileDraft, StudentProfile, field_errors
from backend.flow.fields import FIELDS_BY_NAME, TOTAL_STEPS, required_for_step

REQUIRED_ERROR = "This field is required"


class InvalidTransition(ValueError):
    """Event not allowed in the current state."""


class WizardState(BaseModel):
    """Wizard step, the profile being edited and per-field errors."""

    step: Literal[1, 2] = 1
    draft: ProfileDraft = Field(default_factory=ProfileDraft)
    errors: dict[str, str] = Field(default_factory=dict)

    @property
    def is_last_step(self) -> bool:
        return self.step == TOTAL_STEPS


def edit(state: WizardState, field: str, value: str) -> WizardState:
    if field not in FIELDS_BY_NAME:
        raise InvalidTransition(f"Unknown field: {field}")
    draft = state.draft.model_copy(update={field: value})
    errors = {k: v for k, v in state.errors.items() if k != field}
    return state.model_copy(update={"draft": draft, "errors": errors})


def next_step(state: WizardState) -> WizardState:
    missing = [
        name for name in required_for_step(state.step) if not getattr(state.draft, name).strip()
    ]
    if missing:
        errors = dict(state.errors)
        errors.update({name: REQUIRED_ERROR for name in missing})
        return state.model_copy(update={"errors": errors})

    return state.model_copy(update={"step": min(state.step + 1, TOTAL_STEPS)})


def previous_step(state: WizardState) -> WizardState:
    return state.model_copy(update={"step": max(state.step - 1, 1)})


def submit(state: WizardState) -> tuple[WizardState, StudentProfile | None]:
    """
    Validate the full profile.

    Returns:
        (state, profile) on success, or (state with errors, None) on failure,
        moved back to the first step that has a missing field

    Raises:
        InvalidTransition: when called before the last step
    """
    if not state.is_last_step:
        raise InvalidTransition(f"Cannot submit from step {state.step}")

    try:
        profile = state.draft.to_profile()
    except ValidationError as e:
        errors = field_errors(e)
        steps = [FIELDS_BY_NAME[name].step for name in errors if name in FIELDS_BY_NAME]
        step = min(steps, default=state.step)
        return state.model_copy(update={"step": step, "errors": errors}), None

    return state.model_copy(update={"errors": {}}), profile
