# src/idf_pipeline/core/config/merge.py
"""
Deep-merge de configuração (defaults + override local).

Política de merge (v1):
    - dict → merge recursivo por chave
    - list → sobrescrita total (ex.: `command` de um step)
    - escalar → sobrescrita direta
    - None na base → aceita qualquer override (ex.: `programs_dir: null`)
    - conflito de tipos → erro estrutural explícito

Nenhum input é mutado.
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Retorna uma nova configuração com `override` aplicado sobre `base`.

    Args:
        base (Dict[str, Any]): Configuração base (defaults).
        override (Dict[str, Any]): Overrides explícitos.

    Returns:
        Dict[str, Any]: Novo dicionário resultante.

    Raises:
        ConfigTypeConflictError: Se uma chave mudar de tipo entre base e override.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    result: Dict[str, Any] = deepcopy(base)

    for key, override_value in override.items():
        base_value = result.get(key)

        if key not in result or base_value is None:
            result[key] = deepcopy(override_value)
        elif isinstance(base_value, dict) and isinstance(override_value, dict):
            result[key] = deep_merge(base_value, override_value)
        elif isinstance(override_value, list) and isinstance(base_value, list):
            result[key] = deepcopy(override_value)
        elif override_value is not None and type(base_value) is not type(override_value):
            raise ConfigTypeConflictError(
                f"Conflito de tipo na chave '{key}': "
                f"{type(base_value).__name__} vs {type(override_value).__name__}"
            )
        else:
            result[key] = deepcopy(override_value)

    return result
