# src/idf_pipeline/core/config/__init__.py
"""
Camada de configuração do orquestrador.

Responsabilidades do pacote:
    - Carregar o arquivo de defaults empacotado e overrides locais
    - Resolver a configuração final via deep-merge determinístico
    - Expor seções por step e do engine

Invariantes:
    - A configuração final é um dicionário puro (dict)
    - A mesma entrada sempre produz a mesma configuração final
"""

from .errors import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidConfigSyntaxError,
    UnsupportedConfigFormatError,
)
from .loader import DEFAULTS_PATH, engine_settings, load_config, step_settings
from .merge import deep_merge

__all__ = [
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigTypeConflictError",
    "DEFAULTS_PATH",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "InvalidConfigSyntaxError",
    "UnsupportedConfigFormatError",
    "deep_merge",
    "engine_settings",
    "load_config",
    "step_settings",
]
