# src/idf_pipeline/core/engine/engine.py
"""
Engine de execução do pipeline.

Percorre os datasets selecionados (ordem do catálogo) e, para cada um,
os steps selecionados (ordem do registry):

- dry-run: emite o nome do step como linha de preview, sem invocar o handler;
- execução: invoca `handler(working_dir, dataset)`; status 0 segue adiante,
  qualquer outro status encerra **toda** a run (steps e datasets restantes).

Política de falha:
- Sem retry e sem rollback: saídas de steps anteriores permanecem em disco.
- Exceções levantadas por handlers são convertidas em PipelineErrorPayload
  e tratadas como falha do step (fail-fast também se aplica).
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, TextIO, Tuple

from idf_pipeline.core.config import engine_settings, step_settings
from idf_pipeline.core.errors import EXIT_OK, EXIT_USAGE, exception_to_error
from idf_pipeline.core.exceptions import HandlerFailure
from idf_pipeline.core.pipeline.context import RunContext
from idf_pipeline.core.pipeline.types import (
    Handler,
    RunPlan,
    Step,
    StepName,
    StepResult,
    StepStatus,
)

from .runner import ProgramRunner, SubprocessRunner

ENGINE_ID = "engine"


@dataclass(frozen=True)
class RunResult:
    """Resultado agregado de uma run: resultados na ordem de execução e a falha, se houver."""

    results: Tuple[StepResult, ...] = ()
    failed: Optional[StepResult] = None

    @property
    def ok(self) -> bool:
        return self.failed is None

    @property
    def exit_code(self) -> int:
        return EXIT_OK if self.ok else EXIT_USAGE

    @property
    def error(self) -> Optional[Dict[str, Any]]:
        if self.failed is None:
            return None
        return self.failed.payload.get("error")


class Engine:
    """Executor sequencial datasets × steps com abort na primeira falha."""

    def __init__(
        self,
        *,
        plan: RunPlan,
        ctx: RunContext,
        runner: Optional[ProgramRunner] = None,
        handlers: Optional[Mapping[StepName, Handler]] = None,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ):
        self.plan = plan
        self.ctx = ctx
        self.runner = runner
        self._overrides: Dict[StepName, Handler] = dict(handlers or {})
        self._bound: Dict[StepName, Handler] = {}
        self.out = out
        self.err = err

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------
    def _runner(self) -> ProgramRunner:
        if self.runner is None:
            programs_dir = engine_settings(self.ctx.config).get("programs_dir")
            self.runner = SubprocessRunner(cwd=programs_dir)
        return self.runner

    def _handler_for(self, step: Step) -> Handler:
        if step.name in self._overrides:
            return self._overrides[step.name]
        if step.name not in self._bound:
            self._bound[step.name] = step.handler(
                runner=self._runner(),
                ctx=self.ctx,
                settings=step_settings(self.ctx.config, step.name.value),
            )
        return self._bound[step.name]

    # ------------------------------------------------------------------
    # Saída para o operador
    # ------------------------------------------------------------------
    def _emit(self, line: str) -> None:
        print(line, file=self.out if self.out is not None else sys.stdout, flush=True)

    def _emit_error(self, line: str) -> None:
        print(line, file=self.err if self.err is not None else sys.stderr, flush=True)

    # ------------------------------------------------------------------
    # Execução
    # ------------------------------------------------------------------
    def _execute(self, step: Step, dataset: str) -> StepResult:
        sid = step.name.value
        self._emit(f"--> {sid}")
        self.ctx.log(step_id=sid, level="info", message="step started", dataset=dataset)

        try:
            status = self._handler_for(step)(self.plan.working_dir, dataset)
        except Exception as e:
            error = exception_to_error(e)
            self.ctx.log(step_id=sid, level="error", message=error.message, dataset=dataset)
            return StepResult(
                step=step.name,
                dataset=dataset,
                status=StepStatus.FAILED,
                summary=error.message,
                payload={"error": error.to_dict()},
            )

        if status != 0:
            error = exception_to_error(
                HandlerFailure(
                    message=f"Step '{sid}' failed for dataset '{dataset}' with exit status {status}",
                    details={"step": sid, "dataset": dataset, "exit_code": status},
                )
            )
            self.ctx.log(step_id=sid, level="error", message="step failed", dataset=dataset, exit_code=status)
            return StepResult(
                step=step.name,
                dataset=dataset,
                status=StepStatus.FAILED,
                exit_code=status,
                summary=error.message,
                payload={"error": error.to_dict()},
            )

        self.ctx.log(step_id=sid, level="info", message="step finished", dataset=dataset)
        return StepResult(
            step=step.name,
            dataset=dataset,
            status=StepStatus.SUCCESS,
            exit_code=0,
            summary="ok",
        )

    def run(self) -> RunResult:
        results = []

        for dataset in self.plan.datasets:
            self._emit(f"==> Processing dataset {dataset}")
            self.ctx.log(step_id=ENGINE_ID, level="info", message="dataset started", dataset=dataset)

            for step in self.plan.steps:
                if self.plan.dry_run:
                    self._emit(f"    {step.name.value}")
                    results.append(
                        StepResult(
                            step=step.name,
                            dataset=dataset,
                            status=StepStatus.PREVIEWED,
                            summary="dry run",
                        )
                    )
                    continue

                result = self._execute(step, dataset)
                results.append(result)

                if result.status == StepStatus.FAILED:
                    self._emit_error(f"ERROR: {result.summary}")
                    return RunResult(results=tuple(results), failed=result)

        return RunResult(results=tuple(results))
