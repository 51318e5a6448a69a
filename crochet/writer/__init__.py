from .writer import pretty_format, render_round

__all__ = [
    "pretty_format",
    "render_round",
]
