"""Orchestration of a single analysis run over immutable state.

:mod:`models` defines the settings and state records, :mod:`pipeline` runs
the analysis steps in order, and :mod:`demo` supplies a synthetic series.
"""

from .demo import demo_signal
from .models import AnalysisState, FilterSettings
from .pipeline import run_analysis

__all__ = ["AnalysisState", "FilterSettings", "demo_signal", "run_analysis"]
