# src/idf_pipeline/core/config/loader.py
"""
Loader de configuração do orquestrador.

A configuração efetiva é resolvida a partir de:
    - o arquivo de defaults empacotado (`config.defaults.yaml`)
    - um arquivo de override opcional (YAML ou JSON)

Chaves conhecidas (v1):
    engine.programs_dir      diretório onde os programas externos rodam
    engine.log_level         limiar de eco dos eventos da run em stderr
    steps.<nome>.command     argv base do programa de cada step
    steps.intervals.extension  sufixo dos arquivos de entrada do step intervals

Limites explícitos:
    - Não valida a existência dos programas configurados
    - Não interage com o Engine nem com os handlers
"""

import json
import shlex
from pathlib import Path
from typing import Any, Dict, Type, Union

import yaml  # PyYAML

from .merge import deep_merge
from .errors import (
    ConfigFileNotFoundError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidConfigSyntaxError,
    UnsupportedConfigFormatError,
)

DEFAULTS_PATH = Path(__file__).resolve().parents[2] / "config.defaults.yaml"


def _normalize_commands(data: Dict[str, Any]) -> Dict[str, Any]:
    """`steps.<nome>.command` em forma de string vira lista (shlex), como nos defaults."""
    steps_cfg = data.get("steps")
    if not isinstance(steps_cfg, dict):
        return data
    for section in steps_cfg.values():
        if isinstance(section, dict) and isinstance(section.get("command"), str):
            section["command"] = shlex.split(section["command"])
    return data


def _load_file(
    path: Path, missing: Type[ConfigFileNotFoundError] = ConfigFileNotFoundError
) -> Dict[str, Any]:
    """
    Carrega um arquivo de configuração e valida o tipo raiz.

    Arquivos vazios são interpretados como dicionários vazios.

    Raises:
        ConfigFileNotFoundError: Se o arquivo não existir (`missing` define a subclasse).
        UnsupportedConfigFormatError: Se a extensão não for suportada.
        InvalidConfigSyntaxError: Se o conteúdo não for YAML/JSON válido.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise missing(f"Arquivo de configuração não encontrado: {path}")

    suffix = path.suffix.lower()
    try:
        if suffix in {".yaml", ".yml"}:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        elif suffix == ".json":
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        else:
            raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise InvalidConfigSyntaxError(f"Arquivo de configuração inválido: {path}: {exc}") from exc

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return _normalize_commands(data)


def load_config(
    *,
    defaults_path: Union[str, Path, None] = None,
    local_path: Union[str, Path, None] = None,
    require_local: bool = False,
) -> Dict[str, Any]:
    """
    Carrega e resolve a configuração efetiva.

    Política de resolução:
        - defaults são obrigatórios (por padrão, o arquivo empacotado)
        - o override local é opcional; quando presente, tem prioridade
        - com `require_local=True` (override passado na CLI) a ausência
          do arquivo local é erro

    Args:
        defaults_path: Caminho para o arquivo base. None usa DEFAULTS_PATH.
        local_path: Caminho opcional para overrides locais.
        require_local: Se True, um `local_path` inexistente levanta erro.

    Returns:
        Dict[str, Any]: Configuração final resolvida.

    Raises:
        DefaultsNotFoundError, ConfigFileNotFoundError, UnsupportedConfigFormatError,
        InvalidConfigSyntaxError, InvalidConfigRootTypeError, ConfigTypeConflictError
    """
    defaults = _load_file(
        Path(defaults_path) if defaults_path is not None else DEFAULTS_PATH,
        missing=DefaultsNotFoundError,
    )

    if local_path is None:
        return defaults

    local_file = Path(local_path)
    if not local_file.exists() and not require_local:
        return defaults

    return deep_merge(defaults, _load_file(local_file))


def step_settings(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    """Retorna a seção `steps.<name>` da configuração (vazia se ausente)."""
    steps_cfg = (config or {}).get("steps", {}) or {}
    return dict(steps_cfg.get(str(name), {}) or {})


def engine_settings(config: Dict[str, Any]) -> Dict[str, Any]:
    return dict((config or {}).get("engine", {}) or {})
