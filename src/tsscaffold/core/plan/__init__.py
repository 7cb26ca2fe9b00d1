"""File plan construction."""

from tsscaffold.core.plan.builder import build_file_plan, render_json

__all__ = ["build_file_plan", "render_json"]
