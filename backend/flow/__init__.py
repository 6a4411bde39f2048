"""
UI flow state machines.

- wizard: Two-step profile form
- page: Landing / form / results orchestration
- fields: Form field catalogue
"""

from backend.flow.page import FormStep, Landing, ResultsStep, submit_profile, transition
from backend.flow.wizard import InvalidTransition, WizardState

__all__ = [
    "FormStep",
    "InvalidTransition",
    "Landing",
    "ResultsStep",
    "WizardState",
    "submit_profile",
    "transition",
]
