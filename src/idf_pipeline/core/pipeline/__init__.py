# src/idf_pipeline/core/pipeline/__init__.py
"""
# Pipeline Core

Estruturas fundamentais do pipeline:

## Componentes
- **types**: `StepName`, `Step`, `StepStatus`, `StepResult`, `RunPlan`
- **registry**: `StepRegistry` e a instância de processo `STEP_REGISTRY`
- **catalogue**: `DatasetCatalogue` e `DATASET_CATALOGUE`
- **selector**: gramática de seletores → seleção canônica
- **context**: `RunContext` (eventos estruturados e warnings da run)

## Invariantes
- A ordem do registry é a única ordem de execução
- Um step ou dataset aparece no máximo uma vez por run
- Registry e catálogo não possuem API de mutação
"""
