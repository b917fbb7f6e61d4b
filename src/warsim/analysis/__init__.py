"""Batch statistics over many seeded games."""

from warsim.analysis.survey import SurveyConfig, SurveyReport, run_survey

__all__ = [
    "SurveyConfig",
    "SurveyReport",
    "run_survey",
]
