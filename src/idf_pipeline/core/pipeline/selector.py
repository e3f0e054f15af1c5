# src/idf_pipeline/core/pipeline/selector.py
"""
Parser de seletores de intervalo (steps e datasets).

Um seletor é uma string separada por vírgulas; cada token é resolvido
independentemente segundo a gramática:

    all            → tudo (somente quando é a string inteira)
    NAME           → apenas NAME
    NAME-          → NAME até o último item
    -NAME          → primeiro item até NAME
    NAME1-NAME2    → intervalo fechado [NAME1, NAME2]

Os conjuntos de cada token são unidos em um vetor booleano de
pertencimento do tamanho do registry/catálogo. A sequência canônica é
obtida iterando esse vetor em ordem crescente, o que garante execução
na ordem do registry, sem duplicatas, independente da ordem de entrada.

Intervalos com início depois do fim (ex.: "intervals-durations") produzem
seleção vazia, sem erro.
"""

from __future__ import annotations

from typing import Callable, List, Tuple

from idf_pipeline.core.exceptions import InvalidSelector

from .catalogue import DATASET_CATALOGUE, DatasetCatalogue
from .registry import STEP_REGISTRY, StepRegistry
from .types import Step

ALL = "all"
RANGE_SEPARATOR = "-"
TOKEN_SEPARATOR = ","


def _invalid(token: str, selector: str) -> InvalidSelector:
    return InvalidSelector(
        message=f"Invalid selector token: {token!r}",
        details={"token": token, "selector": selector},
        hint="Use NAME, NAME-, -NAME, NAME1-NAME2 or 'all'",
    )


def _token_span(
    token: str, selector: str, size: int, lookup: Callable[[str], int]
) -> Tuple[int, int]:
    if not token or token.count(RANGE_SEPARATOR) > 1:
        raise _invalid(token, selector)

    if RANGE_SEPARATOR not in token:
        ordinal = lookup(token)
        return ordinal, ordinal

    head, tail = (part.strip() for part in token.split(RANGE_SEPARATOR))
    if not head and not tail:
        raise _invalid(token, selector)

    start = lookup(head) if head else 0
    end = lookup(tail) if tail else size - 1
    return start, end


def parse_membership(selector: str, size: int, lookup: Callable[[str], int]) -> List[bool]:
    """
    Converte `selector` em um vetor de pertencimento de tamanho `size`.

    Args:
        selector: string do usuário (ex.: "intervals,durations-ams").
        size: tamanho do registry/catálogo.
        lookup: nome → posição; levanta UnknownStep/UnknownDataset.

    Raises:
        InvalidSelector: token com forma inválida.
    """
    if selector.strip() == ALL:
        return [True] * size

    selected = [False] * size
    for raw in selector.split(TOKEN_SEPARATOR):
        start, end = _token_span(raw.strip(), selector, size, lookup)
        for position in range(start, end + 1):
            selected[position] = True
    return selected


def select_steps(selector: str, registry: StepRegistry = STEP_REGISTRY) -> List[Step]:
    """Steps selecionados, na ordem canônica do registry."""
    mask = parse_membership(selector, len(registry), registry.lookup)
    return [step for step in registry if mask[step.ordinal]]


def select_datasets(selector: str, catalogue: DatasetCatalogue = DATASET_CATALOGUE) -> List[str]:
    """Datasets selecionados, na ordem de declaração do catálogo."""
    mask = parse_membership(selector, len(catalogue), catalogue.lookup)
    return [name for position, name in enumerate(catalogue) if mask[position]]
