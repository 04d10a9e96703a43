"""Two-stack sorting puzzle: a solver, a checker, a formatter and viewers for playback."""

__version__ = "0.1.0"