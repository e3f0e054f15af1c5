# src/idf_pipeline/steps/__init__.py
"""
Handlers concretos do pipeline IDF.

`HANDLERS` é a tabela estática StepName → fábrica de handler usada para
construir o registry; a ordem de execução vem de `StepName`, não desta
tabela.
"""

from typing import Dict

from idf_pipeline.core.pipeline.types import HandlerFactory, StepName

from .ams import AnnualMaximumSeriesStep
from .base import DirectoryStep
from .durations import DurationsStep
from .intervals import IntervalsStep

HANDLERS: Dict[StepName, HandlerFactory] = {
    StepName.DURATIONS: DurationsStep,
    StepName.AMS: AnnualMaximumSeriesStep,
    StepName.INTERVALS: IntervalsStep,
}

__all__ = [
    "AnnualMaximumSeriesStep",
    "DirectoryStep",
    "DurationsStep",
    "HANDLERS",
    "IntervalsStep",
]
