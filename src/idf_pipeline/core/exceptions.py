"""
IDF Pipeline: Exceções canônicas (v1)

Este módulo define as exceções tipadas do orquestrador.

Objetivo:
- Permitir que seletores, CLI e handlers levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para PipelineErrorPayload
- Evitar ValueError/RuntimeError genéricos na validação de entrada

Regras:
- Exceções carregam apenas dados estruturados (serializáveis).
- A validação de argumentos ocorre antes de qualquer execução.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class PipelineException(Exception):
    """Base para exceções internas do orquestrador.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message


# ---------------------------------------------------------------------------
# Argumentos / Seleção
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class InvalidArgument(PipelineException):
    """Quantidade ou forma de argumentos inválida."""


@dataclass(frozen=True)
class UnknownStep(PipelineException):
    """Nome de step inexistente no registry."""


@dataclass(frozen=True)
class UnknownDataset(PipelineException):
    """Identificador de dataset fora do catálogo."""


@dataclass(frozen=True)
class InvalidSelector(PipelineException):
    """Token de seleção com forma sintática inválida."""


# ---------------------------------------------------------------------------
# Execução (handlers)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MissingInputDirectory(PipelineException):
    """Diretório (ou arquivos) de entrada do step não existe."""


@dataclass(frozen=True)
class OutputDirectoryCreationFailure(PipelineException):
    """Não foi possível criar o diretório de saída do step."""


@dataclass(frozen=True)
class HandlerFailure(PipelineException):
    """Programa de transformação externo retornou status diferente de zero."""


def unknown_step(name: str, legal: List[str]) -> UnknownStep:
    return UnknownStep(
        message=f"Unknown step: {name!r}",
        details={"name": name, "legal": list(legal)},
        hint="Valid steps: " + ", ".join(legal),
    )


def unknown_dataset(name: str, legal: List[str]) -> UnknownDataset:
    return UnknownDataset(
        message=f"Unknown dataset: {name!r}",
        details={"name": name, "legal": list(legal)},
        hint="Valid datasets: " + ", ".join(legal),
    )
