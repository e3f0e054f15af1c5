# src/idf_pipeline/core/__init__.py
"""
Core do orquestrador.

Reúne as responsabilidades de seleção e agendamento:
    - registry fixo de steps e catálogo fixo de datasets
    - gramática de seletores (canonicalização e deduplicação)
    - Engine sequencial com abort na primeira falha e modo dry-run
    - erros tipados e taxonomia de códigos de saída

O core não conhece os programas de transformação: handlers são
tratados como caixas-pretas que devolvem um status inteiro.
"""
