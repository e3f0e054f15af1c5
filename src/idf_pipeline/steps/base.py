# src/idf_pipeline/steps/base.py
"""
Base dos handlers de step baseados em diretórios.

Cada handler segue o mesmo contrato:
    1. verificar que o diretório de entrada existe (senão: diagnóstico + status 1)
    2. garantir o diretório de saída (falha ao criar: diagnóstico + status 1)
    3. invocar o programa de transformação com argumentos determinísticos
    4. devolver o exit status do programa sem alteração

Argumentos do programa:
    <command...> --input <entrada...> --output <saída> --dataset <id>

Limites explícitos:
    - Não interpreta a saída do programa
    - Não decide política de abort (responsabilidade do Engine)
"""

from __future__ import annotations

import shlex
from abc import ABC
from pathlib import Path
from typing import Any, List, Mapping, Optional

from idf_pipeline.core.engine.runner import ProgramRunner
from idf_pipeline.core.exceptions import (
    MissingInputDirectory,
    OutputDirectoryCreationFailure,
    PipelineException,
)
from idf_pipeline.core.pipeline.context import RunContext
from idf_pipeline.core.pipeline.types import StepName

FAILURE_STATUS = 1


def require_input_dir(path: Path) -> Path:
    if not path.is_dir():
        raise MissingInputDirectory(
            message=f"Input directory not found: {path}",
            details={"path": str(path)},
            hint="Run the previous step for this dataset first",
        )
    return path


def ensure_output_dir(path: Path) -> Path:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputDirectoryCreationFailure(
            message=f"Cannot create output directory {path}: {exc.strerror or exc}",
            details={"path": str(path)},
        ) from exc
    return path


class DirectoryStep(ABC):
    """Handler que lê `input_subdir` e escreve `output_subdir` sob DATA_DIR."""

    name: StepName
    description: str = ""
    input_subdir: str
    output_subdir: str
    default_command: str

    def __init__(
        self,
        *,
        runner: ProgramRunner,
        ctx: RunContext,
        settings: Optional[Mapping[str, Any]] = None,
    ):
        self.runner = runner
        self.ctx = ctx
        self.settings = dict(settings or {})

    def command(self) -> List[str]:
        cmd = self.settings.get("command") or self.default_command
        if isinstance(cmd, str):
            return shlex.split(cmd)
        return [str(part) for part in cmd]

    def resolve_inputs(self, working_dir: Path, dataset: str) -> List[Path]:
        return [require_input_dir(working_dir / self.input_subdir)]

    def build_args(self, inputs: List[Path], output: Path, dataset: str) -> List[str]:
        return [
            *self.command(),
            "--input",
            *(str(p) for p in inputs),
            "--output",
            str(output),
            "--dataset",
            dataset,
        ]

    def __call__(self, working_dir: Path, dataset: str) -> int:
        step_id = self.name.value
        try:
            inputs = self.resolve_inputs(working_dir, dataset)
            output = ensure_output_dir(working_dir / self.output_subdir)
        except (MissingInputDirectory, OutputDirectoryCreationFailure) as exc:
            self._report(exc, dataset)
            return FAILURE_STATUS

        args = self.build_args(inputs, output, dataset)
        self.ctx.log(step_id=step_id, level="debug", message="invoking program", dataset=dataset, args=args)
        return self.runner.invoke(args)

    def _report(self, exc: PipelineException, dataset: str) -> None:
        self.ctx.log(
            step_id=self.name.value,
            level="error",
            message=str(exc),
            dataset=dataset,
            error=exc.__class__.__name__,
            **exc.details,
        )
