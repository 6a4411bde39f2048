"""View models for rendered pages."""

from backend.views.results import ResultCard, ResultsView, build_results_view

__all__ = ["ResultCard", "ResultsView", "build_results_view"]
