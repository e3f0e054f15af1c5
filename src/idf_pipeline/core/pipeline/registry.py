# src/idf_pipeline/core/pipeline/registry.py
"""
Registro canônico e imutável de Steps do pipeline.

Este módulo define o `StepRegistry`, a sequência ordenada de Steps
conhecidos pelo orquestrador, e a instância de processo `STEP_REGISTRY`.

Responsabilidades do módulo:
    - Validar ordinais contíguos (0-based) e nomes únicos na construção
    - Resolver nome → ordinal (`lookup`)
    - Expor a listagem (ordinal, nome, descrição) usada pelo `ls`

Decisões arquiteturais:
    - O registry é construído uma única vez e não possui API de mutação
    - A ordem do registry é a única ordem válida de execução
    - Handlers vêm de uma tabela estática StepName → função

Invariantes:
    - Ordinais são contíguos, únicos e imutáveis
    - `describe_all` e a execução usam a mesma fonte

Limites explícitos:
    - Não interpreta seletores (ver `selector`)
    - Não executa Steps
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Mapping, Tuple

from idf_pipeline.core.exceptions import unknown_step

from .types import HandlerFactory, Step, StepName


class DuplicateStepIdError(ValueError):
    """Dois Steps com o mesmo nome ou ordinal fora de sequência na construção do registry."""


class StepRegistry:
    """Sequência ordenada e somente-leitura de Steps."""

    def __init__(self, steps: Iterable[Step]):
        ordered: List[Step] = list(steps)
        seen = set()
        for position, step in enumerate(ordered):
            if step.name in seen:
                raise DuplicateStepIdError(f"Duplicate step name: {step.name}")
            if step.ordinal != position:
                raise DuplicateStepIdError(
                    f"Step '{step.name}' has ordinal {step.ordinal}, expected {position}"
                )
            seen.add(step.name)
        self._steps: Tuple[Step, ...] = tuple(ordered)

    @classmethod
    def from_table(cls, table: Mapping[StepName, HandlerFactory]) -> "StepRegistry":
        """Constrói o registry na ordem de declaração de `StepName`.

        Cada fábrica expõe `description`, usada na listagem.
        """
        ordered = [name for name in StepName if name in table]
        return cls(
            Step(
                name=name,
                ordinal=i,
                description=getattr(table[name], "description", ""),
                handler=table[name],
            )
            for i, name in enumerate(ordered)
        )

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __getitem__(self, ordinal: int) -> Step:
        return self._steps[ordinal]

    def names(self) -> List[str]:
        return [s.name.value for s in self._steps]

    def lookup(self, name: str) -> int:
        """Retorna o ordinal do step `name`; levanta `UnknownStep` se não existir."""
        for step in self._steps:
            if step.name.value == name:
                return step.ordinal
        raise unknown_step(name, self.names())

    def describe_all(self) -> List[Tuple[int, str, str]]:
        return [(s.ordinal, s.name.value, s.description) for s in self._steps]


def _build_default_registry() -> StepRegistry:
    # Import tardio: os handlers dependem de core, não o contrário.
    from idf_pipeline.steps import HANDLERS

    return StepRegistry.from_table(HANDLERS)


STEP_REGISTRY: StepRegistry = _build_default_registry()
