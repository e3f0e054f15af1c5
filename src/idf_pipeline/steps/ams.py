# src/idf_pipeline/steps/ams.py
"""Step `ams`: extrai a série de máximos anuais (annual maximum series) de cada duração."""

from __future__ import annotations

from idf_pipeline.core.pipeline.types import StepName

from .base import DirectoryStep


class AnnualMaximumSeriesStep(DirectoryStep):
    name = StepName.AMS
    description = "Extract the annual maximum series for every duration"
    input_subdir = "durations"
    output_subdir = "annual_maximum_series"
    default_command = "idf-ams"
