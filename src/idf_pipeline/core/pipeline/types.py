# src/idf_pipeline/core/pipeline/types.py
"""
Tipos canônicos do pipeline.

Este módulo define as estruturas fundamentais compartilhadas entre
registry, seletores, Engine e handlers.

Componentes principais:
    - StepName   → enum fechado com um membro por step (ordem canônica)
    - Step       → entrada imutável do registry (nome, ordinal, descrição, handler)
    - Handler    → contrato `(working_dir, dataset) -> status`
    - HandlerFactory → constrói o Handler a partir de runner, contexto e config
    - StepStatus → estados finais (SUCCESS, FAILED, PREVIEWED)
    - StepResult → resultado imutável de um step para um dataset
    - RunPlan    → a run efêmera (diretório, seleções, dry-run)

Invariantes:
    - Enums possuem valores textuais canônicos
    - Step, StepResult e RunPlan são imutáveis
    - Nenhuma lógica de execução vive neste módulo
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple

Handler = Callable[[Path, str], int]
HandlerFactory = Callable[..., Handler]


class StepName(str, Enum):
    """
    Steps conhecidos do pipeline, na ordem canônica de execução.

    A ordem de declaração dos membros é a ordem do registry; o
    despacho nome → handler é feito sobre este enum, nunca por
    resolução dinâmica de nomes.
    """

    DURATIONS = "durations"
    AMS = "ams"
    INTERVALS = "intervals"

    def __str__(self) -> str:
        return self.value


class StepStatus(str, Enum):
    """
    Estado final de um step para um dataset.

    Estados definidos:
        - SUCCESS: handler retornou 0
        - FAILED: handler retornou status diferente de zero (ou levantou exceção)
        - PREVIEWED: dry-run, handler não foi invocado
    """

    SUCCESS = "success"
    FAILED = "failed"
    PREVIEWED = "previewed"


@dataclass(frozen=True)
class Step:
    """Entrada do registry. `ordinal` é a posição 0-based na ordem canônica.

    `handler` é a fábrica do handler; o Engine a instancia uma vez por run
    com o runner, o contexto e a seção `steps.<nome>` da configuração.
    """

    name: StepName
    ordinal: int
    description: str
    handler: HandlerFactory = field(repr=False, compare=False)


@dataclass(frozen=True)
class StepResult:
    """
    Resultado imutável da execução (ou preview) de um step sobre um dataset.

    Campos:
        - step: nome do step
        - dataset: identificador do dataset
        - status: estado final
        - exit_code: status retornado pelo handler (None em dry-run)
        - summary: resumo textual
        - payload: dados livres (ex.: `error` serializado)
    """

    step: StepName
    dataset: str
    status: StepStatus
    exit_code: Optional[int] = None
    summary: str = ""
    payload: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RunPlan:
    """
    Run efêmera: criada uma vez por invocação e descartada ao final.

    `datasets` e `steps` já estão canonicalizados (ordem de catálogo/registry,
    sem duplicatas).
    """

    working_dir: Path
    datasets: Tuple[str, ...]
    steps: Tuple[Step, ...]
    dry_run: bool = False
