"""
Fixtures compartilhados para testes do orquestrador IDF.

Este módulo define fixtures reutilizáveis que fornecem:
- configuração mínima e determinística
- contexto de execução controlado (RunContext) com eco capturável
- handlers stub que registram invocações e devolvem status programados
- runner stub que substitui processos reais
- diretório de dados temporário com a estrutura esperada pelos steps

Decisões arquiteturais:
    - Nenhuma fixture invoca programas externos
    - Handlers e runners stub utilizam duck typing
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Limites explícitos:
    - Não substituir testes de integração com programas reais
    - Não conter lógica de domínio
"""

import io
from datetime import datetime, timezone

import pytest


@pytest.fixture
def project_like_config_defaults_yaml() -> str:
    """YAML de defaults semelhante ao `config.defaults.yaml` empacotado."""
    return """\
engine:
  programs_dir: null
  log_level: WARNING
steps:
  durations:
    command: ["idf-durations"]
  ams:
    command: ["idf-ams"]
  intervals:
    command: ["idf-intervals"]
    extension: ".nc"
"""


@pytest.fixture
def project_like_config_local_yaml() -> str:
    """YAML de override local: troca o programa de `ams` e a extensão de `intervals`."""
    return """\
engine:
  log_level: DEBUG
steps:
  ams:
    command: ["python", "tools/ams.py"]
  intervals:
    extension: ".csv"
"""


@pytest.fixture
def dummy_config() -> dict:
    """
    Configuração mínima já resolvida.

    `log_level` em ERROR mantém o eco dos eventos silencioso nos testes
    que não inspecionam o stream.
    """
    return {
        "engine": {"programs_dir": None, "log_level": "ERROR"},
        "steps": {"intervals": {"extension": ".nc"}},
    }


@pytest.fixture
def dummy_ctx(dummy_config):
    """
    RunContext determinístico para testes.

    `run_id` e `created_at` são fixos; o eco dos eventos vai para um
    StringIO disponível em `ctx.stream`.
    """
    from idf_pipeline.core.pipeline.context import RunContext

    return RunContext(
        run_id="run-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        config=dummy_config,
        meta={"source": "pytest"},
        stream=io.StringIO(),
    )


class _CallLog:
    """Registro compartilhado das invocações (step, dataset) na ordem em que ocorreram."""

    def __init__(self):
        self.calls = []

    def __len__(self):
        return len(self.calls)


@pytest.fixture
def stub_handlers():
    """
    Fixture factory de handlers stub para todos os steps.

    Uso:
        log, handlers = stub_handlers(fail={("ams", "era5"): 3})

    Cada handler registra `(step, dataset)` em `log.calls` e devolve o
    status programado em `fail` (0 quando ausente).
    """
    from idf_pipeline.core.pipeline.types import StepName

    def _factory(fail=None):
        fail = dict(fail or {})
        log = _CallLog()

        def _make(step_name):
            def _handler(working_dir, dataset):
                log.calls.append((step_name.value, dataset))
                return fail.get((step_name.value, dataset), 0)

            return _handler

        return log, {name: _make(name) for name in StepName}

    return _factory


class StubRunner:
    """ProgramRunner em memória: registra argv e devolve `status`."""

    def __init__(self, status=0):
        self.status = status
        self.calls = []

    def invoke(self, args):
        self.calls.append(list(args))
        return self.status


@pytest.fixture
def stub_runner():
    return StubRunner()


@pytest.fixture
def data_dir(tmp_path):
    """Diretório de dados com `pcpt/` criado (entrada do primeiro step)."""
    root = tmp_path / "data"
    (root / "pcpt").mkdir(parents=True)
    return root
