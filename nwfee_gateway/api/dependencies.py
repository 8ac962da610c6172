"""Dependency injection for FastAPI endpoints"""

import logging
from typing import Optional
from fastapi import Request
from nwfee_gateway.domain.models import Ruleset
from nwfee_gateway.domain.exceptions import RulesetLoadError, RulesetNotLoadedError
from nwfee_gateway.infrastructure.rulesets.loader import load_ruleset
from nwfee_gateway.infrastructure.observability.metrics import ruleset_load_failures_counter

_active_ruleset: Optional[Ruleset] = None


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_ruleset() -> Ruleset:
    """
    Provide the active ruleset, loading it from settings.ruleset_path on first use.

    Raises:
        RulesetNotLoadedError: If the ruleset file cannot be loaded
    """
    global _active_ruleset

    if _active_ruleset is None:
        try:
            _active_ruleset = load_ruleset()
        except RulesetLoadError as e:
            ruleset_load_failures_counter.inc()
            logging.error(f"Ruleset load failed: {e}")
            raise RulesetNotLoadedError(str(e)) from e

    return _active_ruleset


def reset_ruleset() -> None:
    """Drop the cached ruleset so the next request reloads it"""
    global _active_ruleset
    _active_ruleset = None
