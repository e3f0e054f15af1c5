# tests/core/pipeline/test_run_context_logging.py
"""
Testes de logging estruturado e coleta de warnings no RunContext.

Os testes asseguram que:
- eventos de log são registrados de forma estruturada, com `run_id` e `step_id`
- campos adicionais são preservados sem sobrescrever os de identidade
- warnings são agrupados por step
- apenas eventos com nível >= `engine.log_level` são ecoados no stream

Limites explícitos:
    - Não valida eventos emitidos pelo Engine (ver tests/core/engine)
"""


def test_log_records_structured_event(dummy_ctx):
    dummy_ctx.log(step_id="ams", level="info", message="step started", dataset="era5")

    event = dummy_ctx.events[-1]
    assert event["run_id"] == "run-test-001"
    assert event["step_id"] == "ams"
    assert event["level"] == "info"
    assert event["message"] == "step started"
    assert event["dataset"] == "era5"
    assert "timestamp" in event


def test_echo_respects_log_level(dummy_ctx):
    dummy_ctx.log(step_id="ams", level="info", message="quiet")
    dummy_ctx.log(step_id="ams", level="error", message="loud")

    echoed = dummy_ctx.stream.getvalue()
    assert "quiet" not in echoed
    assert "[ERROR] ams: loud" in echoed


def test_warnings_grouped_by_step(dummy_ctx):
    dummy_ctx.config["engine"]["log_level"] = "warning"
    dummy_ctx.add_warning(step_id="intervals", message="w1")
    dummy_ctx.add_warning(step_id="intervals", message="w2")
    dummy_ctx.add_warning(step_id="ams", message="w3")

    assert dummy_ctx.warnings == {"intervals": ["w1", "w2"], "ams": ["w3"]}
    assert "[WARNING] intervals: w1" in dummy_ctx.stream.getvalue()


def test_create_generates_identity():
    from idf_pipeline.core.pipeline.context import RunContext

    a = RunContext.create({"engine": {}}, data_dir="/data")
    b = RunContext.create()
    assert a.run_id != b.run_id
    assert a.meta == {"data_dir": "/data"}
    assert a.created_at.tzinfo is not None


def test_extra_cannot_override_identity_fields(dummy_ctx):
    """`run_id` e `timestamp` vindos de `extra` não substituem os do contexto."""
    dummy_ctx.log(step_id="ams", level="info", message="ok", run_id="forged", timestamp="never", dataset="era5")

    event = dummy_ctx.events[-1]
    assert event["run_id"] == "run-test-001"
    assert event["timestamp"] != "never"
    assert event["step_id"] == "ams"
    assert event["dataset"] == "era5"
