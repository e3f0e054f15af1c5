# src/idf_pipeline/core/engine/runner.py
"""
Capacidade de invocação de programas externos.

Handlers não chamam `subprocess` diretamente: recebem um `ProgramRunner`,
o que permite substituir processos reais por stubs em memória nos testes.

Contrato:
    invoke(args) -> int   (0 = sucesso; demais valores = exit status do programa)

Limites explícitos:
    - Não interpreta a saída do programa, apenas o exit status
    - Não aplica timeout nem retry
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional, Protocol, Sequence, Union, runtime_checkable


@runtime_checkable
class ProgramRunner(Protocol):
    """Executa um programa externo e devolve seu exit status."""

    def invoke(self, args: Sequence[str]) -> int:
        ...


class SubprocessRunner:
    """
    Runner de produção: executa `args` bloqueando até o término.

    `cwd` é o diretório dos programas de transformação (`engine.programs_dir`);
    é passado explicitamente a cada processo em vez de alterar o diretório
    corrente do processo orquestrador.
    """

    def __init__(self, cwd: Union[str, Path, None] = None):
        self.cwd: Optional[Path] = Path(cwd) if cwd is not None else None

    def invoke(self, args: Sequence[str]) -> int:
        completed = subprocess.run(
            [str(a) for a in args],
            cwd=str(self.cwd) if self.cwd is not None else None,
            check=False,
        )
        return completed.returncode
