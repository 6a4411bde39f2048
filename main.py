"""
Chatra Shayak - CLI Entry Point.

Walks the same profile wizard as the web app in the terminal, or serves the
web app with `python main.py serve`.
"""

import asyncio
import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from backend.config import settings
from backend.flow import wizard
from backend.flow.fields import STEP_TITLES, TOTAL_STEPS, FormField, fields_for_step
from backend.flow.page import Back, FormStep, Landing, ResultsStep, Start, submit_profile, transition
from backend.tools.tavily_search import TavilySearchClient, search_scholarships
from backend.views.results import EMPTY_MESSAGE, EMPTY_TITLE, ResultCard, build_results_view


class QuitRequested(Exception):
    """User typed /quit."""


def ask(prompt: str) -> str:
    answer = input(prompt).strip()
    if answer.lower() == "/quit":
        raise QuitRequested
    return answer


def choose_option(field: FormField, answer: str) -> str:
    """Accept an option by number ("2") or by name (case-insensitive)."""
    if answer.isdigit() and 1 <= int(answer) <= len(field.options):
        return field.options[int(answer) - 1]
    for option in field.options:
        if option.lower() == answer.lower():
            return option
    return ""


def prompt_field(field: FormField, current: str, error: str | None = None) -> str:
    """Prompt for one field. Enter keeps the current value."""
    if error:
        print(f"  ! {error}")
    if field.is_select:
        for i, option in enumerate(field.options, 1):
            print(f"    {i}. {option}")

    suffix = f" [{current}]" if current else ""
    optional = "" if field.required else " (optional)"
    answer = ask(f"{field.label}{optional}{suffix}: ")
    if not answer:
        return current
    if field.is_select:
        return choose_option(field, answer)
    return answer


def fill_step(state: wizard.WizardState, only: set[str] | None = None) -> wizard.WizardState:
    for field in fields_for_step(state.step):
        if only is not None and field.name not in only:
            continue
        value = prompt_field(field, getattr(state.draft, field.name), state.errors.get(field.name))
        state = wizard.edit(state, field.name, value)
    return state


def format_card(card: ResultCard) -> str:
    return (
        f"**{card.title}**\n"
        f"{card.host}  [{card.badge}]\n"
        f"{card.content}\n"
        f"Apply: {card.url}\n"
    )


def run_form(state: FormStep, client: TavilySearchClient):
    """Fill both steps, then search. Returns the next page state."""
    current = state.wizard
    pending = None  # Fields to re-prompt after a failed check

    while True:
        print(f"\nStep {current.step} of {TOTAL_STEPS}: {STEP_TITLES[current.step]}")
        print("-" * 40)
        current = fill_step(current, pending)

        if not current.is_last_step:
            checked = wizard.next_step(current)
            pending = set(checked.errors) or None
            current = checked
            continue

        checked, profile = wizard.submit(current)
        if profile is None:
            pending, current = set(checked.errors), checked
            continue

        async def search(query: str) -> dict:
            return (await search_scholarships(query, client)).body

        print("\nSearching...")
        form = state.model_copy(update={"wizard": checked})
        result = asyncio.run(
            submit_profile(form, profile, search, surface_errors=settings.surface_search_errors)
        )
        if isinstance(result, FormStep):
            if result.error:
                print(result.error)
            again = ask("Search failed. Press Enter to retry or /back to edit: ")
            current, pending = result.wizard, set()
            if again.lower() == "/back":
                current, pending = wizard.previous_step(result.wizard), None
            continue
        return result


def show_results(state: ResultsStep):
    view = build_results_view(state.results, state.profile)
    print(f"\n{view.summary}\n")
    if view.is_empty:
        print(EMPTY_TITLE)
        print(EMPTY_MESSAGE)
        return

    print(f"Found {len(view.cards)} scholarships:\n")
    print("\n---\n".join(format_card(card) for card in view.cards))


def serve():
    import uvicorn

    uvicorn.run("backend.api.app:app", host=settings.host, port=settings.port)


def main():
    """Run the scholarship finder CLI."""
    if len(sys.argv) > 1 and sys.argv[1] == "serve":
        serve()
        return

    logging.basicConfig(level=settings.log_level)

    print("Chatra Shayak")
    print("Your AI-powered scholarship finder")
    print("=" * 40)
    print("Commands: /quit (any prompt)")

    client = TavilySearchClient.from_settings()
    state = transition(Landing(), Start())

    try:
        while True:
            if isinstance(state, FormStep):
                state = run_form(state, client)
                continue

            show_results(state)
            choice = ask("\n/back to modify your search, /quit to exit: ")
            if choice.lower() == "/back":
                state = transition(state, Back())
    except (QuitRequested, KeyboardInterrupt, EOFError):
        pass

    print("Goodbye!")


if __name__ == "__main__":
    main()
