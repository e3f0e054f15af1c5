"""
IDF Pipeline: Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do orquestrador e a
taxonomia de códigos de saída da CLI.

Erros são tratados como parte do contrato operacional, devendo ser:

- explícitos
- serializáveis
- acionáveis

Nenhum erro é silenciado.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from .exceptions import (
    HandlerFailure,
    InvalidArgument,
    InvalidSelector,
    MissingInputDirectory,
    OutputDirectoryCreationFailure,
    PipelineException,
    UnknownDataset,
    UnknownStep,
)


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineErrorPayload:
    """
    Payload canônico de erro.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Argumentos / Seleção
INVALID_ARGUMENT = "INVALID_ARGUMENT"
UNKNOWN_STEP = "UNKNOWN_STEP"
UNKNOWN_DATASET = "UNKNOWN_DATASET"
INVALID_SELECTOR = "INVALID_SELECTOR"

# Handlers
MISSING_INPUT_DIRECTORY = "MISSING_INPUT_DIRECTORY"
OUTPUT_DIRECTORY_CREATION_FAILURE = "OUTPUT_DIRECTORY_CREATION_FAILURE"
HANDLER_FAILURE = "HANDLER_FAILURE"

# Engine
ENGINE_EXECUTION_ERROR = "ENGINE_EXECUTION_ERROR"

_CODES = {
    InvalidArgument: INVALID_ARGUMENT,
    UnknownStep: UNKNOWN_STEP,
    UnknownDataset: UNKNOWN_DATASET,
    InvalidSelector: INVALID_SELECTOR,
    MissingInputDirectory: MISSING_INPUT_DIRECTORY,
    OutputDirectoryCreationFailure: OUTPUT_DIRECTORY_CREATION_FAILURE,
    HandlerFailure: HANDLER_FAILURE,
}


# ---------------------------------------------------------------------------
# Códigos de saída da CLI
# ---------------------------------------------------------------------------

EXIT_OK = 0
EXIT_FATAL = 1  # DATA_DIR inexistente, configuração inválida
EXIT_USAGE = 2  # nomes/seletores inválidos e falha de handler


def exception_to_error(exc: Exception) -> PipelineErrorPayload:
    """Converte exceções em PipelineErrorPayload (serializável, acionável).

    Regras:
    - PipelineException: já vem com message/details/hint; o código vem do tipo.
    - Outras exceções: encapsular como ENGINE_EXECUTION_ERROR sem expor stack trace.
    """
    if isinstance(exc, PipelineException):
        return PipelineErrorPayload(
            type=_CODES.get(type(exc), exc.__class__.__name__),
            message=str(exc) or "Erro de execução",
            details=dict(exc.details or {}),
            hint=exc.hint,
        )

    return PipelineErrorPayload(
        type=ENGINE_EXECUTION_ERROR,
        message=str(exc) or "Erro inesperado durante execução",
        details={"exception_class": exc.__class__.__name__},
        hint="Verifique o log do step e o programa de transformação",
    )


def format_error(payload: PipelineErrorPayload) -> str:
    """Linha de diagnóstico para o operador (stderr)."""
    text = f"error: {payload.message}"
    if payload.hint:
        text += f"\n  hint: {payload.hint}"
    return text
