"""Pipelines: search execution."""

from placefinder.pipelines.search import AnchorUnavailableError, SearchFailedError, SearchPipeline

__all__ = ["AnchorUnavailableError", "SearchFailedError", "SearchPipeline"]
