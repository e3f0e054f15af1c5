# src/idf_pipeline/steps/durations.py
"""
Step `durations`: acumula a precipitação (`pcpt/`) em cada duração
alvo e grava as séries em `durations/`.
"""

from __future__ import annotations

from idf_pipeline.core.pipeline.types import StepName

from .base import DirectoryStep


class DurationsStep(DirectoryStep):
    name = StepName.DURATIONS
    description = "Aggregate raw precipitation into rolling-duration totals"
    input_subdir = "pcpt"
    output_subdir = "durations"
    default_command = "idf-durations"
