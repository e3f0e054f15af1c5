# src/idf_pipeline/core/engine/__init__.py
"""
Execução do pipeline.

- **engine**: `Engine` (datasets × steps, fail-fast, dry-run) e `RunResult`
- **runner**: `ProgramRunner` (protocolo) e `SubprocessRunner`

Limites explícitos:
    - Sem concorrência, timeout ou retry
    - Não persiste resultados
"""
