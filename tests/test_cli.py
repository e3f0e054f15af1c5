# tests/test_cli.py
"""
Testes da CLI `run-pipeline`.

Os testes asseguram que:
- `ls` lista steps (numeração 1-based, ordem do registry) e cada dataset uma vez
- erros de argumento, seleção e nomes falham antes de qualquer handler (exit 2)
- DATA_DIR inexistente e config inválida são fatais (exit 1)
- seletores iniciados por "-" não são confundidos com opções
- `-n` faz preview sem invocar handlers
- falha de handler encerra a run com exit 2

Decisões arquiteturais:
    - Handlers e runner são injetados em `main`; nenhum processo real é criado
"""

import io

import pytest

from idf_pipeline.cli import format_listing, main
from idf_pipeline.core.pipeline.catalogue import DATASET_CATALOGUE


def _run(argv, **kwargs):
    out, err = io.StringIO(), io.StringIO()
    code = main(argv, out=out, err=err, **kwargs)
    return code, out.getvalue(), err.getvalue()


def test_ls_lists_steps_and_datasets():
    code, out, _ = _run(["ls"])

    assert code == 0
    lines = out.splitlines()
    assert lines[0] == "Steps:"
    assert lines[1].startswith("  1. durations")
    assert lines[2].startswith("  2. ams")
    assert lines[3].startswith("  3. intervals")
    datasets = lines[lines.index("Datasets:") + 1:]
    assert [d.strip() for d in datasets] == DATASET_CATALOGUE.names()
    assert out.strip() == format_listing()


def test_help_exits_zero(capsys):
    assert main(["-h"]) == 0
    assert "usage: run-pipeline" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [[], ["/data"], ["/data", "all"], ["a", "b", "c", "d"], ["ls", "x"]])
def test_wrong_argument_count_is_usage_error(argv, stub_handlers):
    log, handlers = stub_handlers()
    code, _, err = _run(argv, handlers=handlers)

    assert code == 2
    assert "Expected DATA_DIR DATA_SETS STEPS" in err
    assert len(log) == 0


def test_missing_data_dir_is_fatal(tmp_path, stub_handlers):
    log, handlers = stub_handlers()
    code, _, err = _run([str(tmp_path / "missing"), "all", "all"], handlers=handlers)

    assert code == 1
    assert "data directory does not exist" in err
    assert len(log) == 0


@pytest.mark.parametrize(
    "datasets, steps, fragment",
    [
        ("all", "peaks", "Unknown step: 'peaks'"),
        ("chirps", "all", "Unknown dataset: 'chirps'"),
        ("all", "ams--", "Invalid selector token"),
    ],
)
def test_selection_errors_happen_before_execution(data_dir, stub_handlers, datasets, steps, fragment):
    log, handlers = stub_handlers()
    code, out, err = _run([str(data_dir), datasets, steps], handlers=handlers)

    assert code == 2
    assert fragment in err
    assert "hint:" in err
    assert out == ""
    assert len(log) == 0


def test_leading_dash_selectors_are_not_options(data_dir, stub_handlers):
    log, handlers = stub_handlers()
    code, _, _ = _run([str(data_dir), "-cmorph", "-ams"], handlers=handlers)

    assert code == 0
    assert log.calls == [("durations", "cmorph"), ("ams", "cmorph")]


def test_dry_run_previews_without_running(data_dir, stub_handlers):
    log, handlers = stub_handlers()
    code, out, _ = _run(["-n", str(data_dir), "era5", "intervals,durations"], handlers=handlers)

    assert code == 0
    assert len(log) == 0
    assert out.splitlines() == ["==> Processing dataset era5", "    durations", "    intervals"]


def test_long_dry_run_flag_after_positionals(data_dir, stub_handlers):
    log, handlers = stub_handlers()
    code, _, _ = _run([str(data_dir), "era5", "all", "--dry-run"], handlers=handlers)

    assert code == 0
    assert len(log) == 0


def test_handler_failure_exits_2(data_dir, stub_handlers):
    log, handlers = stub_handlers(fail={("ams", "cmorph"): 5})
    code, _, err = _run([str(data_dir), "cmorph,era5", "all"], handlers=handlers)

    assert code == 2
    assert log.calls == [("durations", "cmorph"), ("ams", "cmorph")]
    assert "ERROR: Step 'ams' failed for dataset 'cmorph' with exit status 5" in err


def test_reversed_range_warns_and_succeeds(data_dir, stub_handlers):
    log, handlers = stub_handlers()
    code, _, err = _run([str(data_dir), "era5", "intervals-durations"], handlers=handlers)

    assert code == 0
    assert len(log) == 0
    assert "[WARNING] selection: nothing selected; no step will run" in err


def test_real_handlers_with_stub_runner(data_dir, stub_runner):
    code, _, _ = _run([str(data_dir), "gpcc", "-ams"], runner=stub_runner)

    assert code == 0
    assert [call[0] for call in stub_runner.calls] == ["idf-durations", "idf-ams"]
    assert (data_dir / "annual_maximum_series").is_dir()


def test_config_override_changes_commands(tmp_path, data_dir, stub_runner):
    local = tmp_path / "local.yaml"
    local.write_text('steps:\n  durations:\n    command: ["python", "durations.py"]\n', encoding="utf-8")

    code, _, _ = _run(["--config", str(local), str(data_dir), "gpcc", "durations"], runner=stub_runner)

    assert code == 0
    assert stub_runner.calls[0][:2] == ["python", "durations.py"]


def test_missing_config_file_is_fatal(tmp_path, data_dir, stub_handlers):
    log, handlers = stub_handlers()
    code, _, err = _run(["-c", str(tmp_path / "nope.yaml"), str(data_dir), "all", "all"], handlers=handlers)

    assert code == 1
    assert "nope.yaml" in err
    assert len(log) == 0


@pytest.mark.parametrize(
    "filename, content",
    [
        ("bad.yaml", "engine: [unclosed\n"),
        ("bad.json", "{nope"),
    ],
)
def test_malformed_config_file_is_fatal(tmp_path, data_dir, stub_handlers, filename, content):
    local = tmp_path / filename
    local.write_text(content, encoding="utf-8")
    log, handlers = stub_handlers()

    code, out, err = _run(["-c", str(local), str(data_dir), "all", "all"], handlers=handlers)

    assert code == 1
    assert err.startswith("error: ")
    assert filename in err
    assert out == ""
    assert len(log) == 0


def test_string_command_override_is_accepted(tmp_path, data_dir, stub_runner):
    local = tmp_path / "local.yaml"
    local.write_text('steps:\n  durations:\n    command: "python durations.py"\n', encoding="utf-8")

    code, _, err = _run(["-c", str(local), str(data_dir), "gpcc", "durations"], runner=stub_runner)

    assert code == 0, err
    assert stub_runner.calls[0][:3] == ["python", "durations.py", "--input"]
