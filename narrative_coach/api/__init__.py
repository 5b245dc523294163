"""Request-style entry points for the analysis engine"""

from .analysis import Action, analyze, handle_request, run_analysis, describe_api

__all__ = [
    "Action",
    "analyze",
    "handle_request",
    "run_analysis",
    "describe_api",
]
