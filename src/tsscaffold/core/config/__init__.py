"""Answer sources other than the interactive wizard."""

from tsscaffold.core.config.loader import answers_from_options, load_answers

__all__ = ["answers_from_options", "load_answers"]
