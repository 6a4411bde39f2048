"""Results view model: what the results page and the CLI display."""

from pydantic import BaseModel

from backend.api.schemas import ProfileDraft, SearchResult
from backend.utils.parser import display_host, relevance_label
from backend.utils.query import summarize_filters

STATIC_BADGE = "Scholarship"
EMPTY_TITLE = "No Scholarships Found"
EMPTY_MESSAGE = (
    "We couldn't find any scholarships matching your criteria. "
    "Try adjusting your search parameters for better results."
)


class ResultCard(BaseModel):
    title: str
    url: str
    host: str
    content: str
    relevance: str | None = None

    @property
    def badge(self) -> str:
        if self.relevance:
            return f"Relevance: {self.relevance}"
        return STATIC_BADGE


class ResultsView(BaseModel):
    summary: str
    cards: list[ResultCard]

    @property
    def is_empty(self) -> bool:
        return not self.cards


def build_card(result: SearchResult) -> ResultCard:
    return ResultCard(
        title=result.title,
        url=result.url,
        host=display_host(result.url),
        content=result.content,
        relevance=relevance_label(result.score),
    )


def build_results_view(results: list[SearchResult], profile: ProfileDraft) -> ResultsView:
    return ResultsView(
        summary=summarize_filters(profile),
        cards=[build_card(r) for r in results],
    )
