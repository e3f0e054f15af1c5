# src/idf_pipeline/core/pipeline/context.py
"""
Contexto de execução de uma run do pipeline.

Este módulo define o `RunContext`, a estrutura que concentra identidade,
configuração resolvida e o log estruturado de uma invocação.

O RunContext atua como o meio de:
    - registro de eventos estruturados (Engine e handlers)
    - coleta de warnings não fatais por step
    - eco dos eventos relevantes para o operador (stderr)

Princípios fundamentais:
    - Isolamento por execução (cada run possui seu próprio contexto)
    - Ausência de estado global compartilhado
    - Nada é persistido entre invocações

Invariantes:
    - Logs sempre incluem `run_id` e `step_id`
    - Warnings são agrupados por `step_id`
    - Apenas eventos com nível >= `engine.log_level` são ecoados
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, TextIO
from uuid import uuid4

LEVELS = {"debug": 10, "info": 20, "warning": 30, "error": 40}


@dataclass
class RunContext:
    """
    Contexto compartilhado de uma run.

    Campos:
        - run_id, created_at: identidade da execução
        - config: configuração resolvida (ver core.config)
        - meta: dados livres (ex.: data_dir)
        - stream: destino do eco dos eventos (padrão: sys.stderr)
    """

    run_id: str
    created_at: datetime
    config: Dict[str, Any] = field(default_factory=dict)
    meta: Dict[str, Any] = field(default_factory=dict)
    stream: Optional[TextIO] = field(default=None, repr=False)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    @classmethod
    def create(cls, config: Optional[Dict[str, Any]] = None, **meta: Any) -> "RunContext":
        return cls(
            run_id=uuid4().hex[:12],
            created_at=datetime.now(timezone.utc),
            config=dict(config or {}),
            meta=dict(meta),
        )

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def _threshold(self) -> int:
        engine_cfg = (self.config or {}).get("engine", {}) or {}
        level = str(engine_cfg.get("log_level", "warning")).lower()
        return LEVELS.get(level, LEVELS["warning"])

    def log(self, *, step_id: str, level: str, message: str, **extra: Any) -> None:
        # campos de identidade prevalecem sobre `extra`
        event = dict(extra)
        event.update(
            run_id=self.run_id,
            step_id=step_id,
            level=level,
            message=message,
            timestamp=datetime.now(timezone.utc).isoformat(),
        )
        self.events.append(event)

        if LEVELS.get(level, LEVELS["info"]) >= self._threshold():
            stream = self.stream if self.stream is not None else sys.stderr
            print(f"[{level.upper()}] {step_id}: {message}", file=stream)

    def add_warning(self, *, step_id: str, message: str) -> None:
        if step_id not in self.warnings:
            self.warnings[step_id] = []
        self.warnings[step_id].append(message)
        self.log(step_id=step_id, level="warning", message=message)
