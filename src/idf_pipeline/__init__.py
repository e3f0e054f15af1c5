# src/idf_pipeline/__init__.py
"""
IDF Pipeline: orquestrador dos steps de análise de chuvas intensas
(durações → séries de máximos anuais → curvas IDF).

Dado um diretório de dados, um seletor de datasets e um seletor de steps,
executa cada step selecionado, para cada dataset selecionado, exatamente
uma vez e sempre na ordem canônica, independente da ordem (ou das
repetições) com que foram informados.

Arquitetura em alto nível:
    - core.pipeline → tipos, registry de steps, catálogo de datasets, seletores, contexto
    - core.engine   → execução sequencial fail-fast e invocação de programas externos
    - core.config   → carregamento e merge de configuração (YAML/JSON)
    - steps         → handlers concretos (durations, ams, intervals)
    - cli           → `run-pipeline`

Limites explícitos:
    - Não executa steps em paralelo
    - Não faz retry de steps com falha
    - Não persiste estado entre invocações
"""

__version__ = "0.1.0"
