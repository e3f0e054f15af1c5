# src/idf_pipeline/steps/intervals.py
"""
Step `intervals`: ajusta as curvas intensidade-duração-frequência a
partir das séries de máximos anuais.

Diferente dos demais steps, a entrada não é o diretório inteiro: apenas
os arquivos de `annual_maximum_series/` cujo nome contém o identificador
do dataset e termina com a extensão configurada
(`steps.intervals.extension`, padrão ".nc"). Os arquivos são passados
em ordem lexicográfica para que os argumentos sejam determinísticos.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from idf_pipeline.core.exceptions import MissingInputDirectory
from idf_pipeline.core.pipeline.types import StepName

from .base import DirectoryStep, require_input_dir

DEFAULT_EXTENSION = ".nc"


class IntervalsStep(DirectoryStep):
    name = StepName.INTERVALS
    description = "Fit return-interval intensities per duration (IDF curves)"
    input_subdir = "annual_maximum_series"
    output_subdir = "output_interval_durations"
    default_command = "idf-intervals"

    @property
    def extension(self) -> str:
        return str(self.settings.get("extension") or DEFAULT_EXTENSION)

    def resolve_inputs(self, working_dir: Path, dataset: str) -> List[Path]:
        source = require_input_dir(working_dir / self.input_subdir)
        files = sorted(
            p
            for p in source.iterdir()
            if p.is_file() and dataset in p.name and p.name.endswith(self.extension)
        )
        if not files:
            raise MissingInputDirectory(
                message=f"No '*{self.extension}' files for dataset '{dataset}' in {source}",
                details={"path": str(source), "extension": self.extension},
                hint="Run the 'ams' step for this dataset first",
            )
        return files
