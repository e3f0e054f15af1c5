# src/idf_pipeline/core/config/errors.py
"""
Exceções da camada de configuração.

Todas herdam de `ConfigError`, o que permite à CLI capturar qualquer
falha de configuração de forma genérica e encerrar com erro fatal
antes de qualquer step ser executado.
"""


class ConfigError(Exception):
    """
    Exceção base para erros de carregamento ou resolução de configuração.

    Limites explícitos:
        - Não representa erro de seleção (steps/datasets)
        - Não representa falha de handler
    """


class ConfigFileNotFoundError(ConfigError):
    """Arquivo de override passado explicitamente não encontrado."""


class DefaultsNotFoundError(ConfigFileNotFoundError):
    """Arquivo de defaults não encontrado."""


class UnsupportedConfigFormatError(ConfigError):
    """
    Formato de arquivo não suportado.

    Formatos aceitos (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """O conteúdo raiz do arquivo não é um mapa chave-valor."""


class InvalidConfigSyntaxError(ConfigError):
    """O arquivo não pôde ser interpretado como YAML ou JSON válido."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"steps": {"ams": {"command": ["idf-ams"]}}}
        - override: {"steps": "ams"}
    """
