from __future__ import annotations

import json

from randseq import cli


def _numbers_from(output: str) -> list[int]:
    line = next(line for line in output.splitlines() if line.endswith("; "))
    return [int(part) for part in line.split("; ") if part]


def test_cli_uses_defaults(capsys):
    exit_code = cli.main([])

    captured = capsys.readouterr()
    numbers = _numbers_from(captured.out)
    assert exit_code == 0
    assert len(numbers) == 7
    assert all(1 <= number <= 49 for number in numbers)
    assert "All random numbers generated." in captured.out


def test_cli_flags_override_config_file(tmp_path, capsys):
    config_path = tmp_path / "params.json"
    config_path.write_text(json.dumps({"amount": 3, "min": 1, "max": 10}), encoding="utf-8")

    exit_code = cli.main(["--config", str(config_path), "--amount", "10", "--unique", "--seed", "1"])

    numbers = _numbers_from(capsys.readouterr().out)
    assert exit_code == 0
    assert sorted(numbers) == list(range(1, 11))


def test_cli_same_seed_is_reproducible(capsys):
    cli.main(["--seed", "99", "--amount", "6"])
    first = _numbers_from(capsys.readouterr().out)
    cli.main(["--seed", "99", "--amount", "6"])
    second = _numbers_from(capsys.readouterr().out)

    assert first == second


def test_cli_returns_usage_code_for_invalid_range(capsys):
    exit_code = cli.main(["--min", "10", "--max", "10"])

    assert exit_code == cli.EXIT_USAGE
    captured = capsys.readouterr()
    assert "Stream error: Invalid range" in captured.err
    assert "Stream error" not in captured.out


def test_cli_returns_usage_code_for_range_too_small(capsys):
    exit_code = cli.main(["--amount", "10", "--min", "1", "--max", "5", "--unique"])

    assert exit_code == cli.EXIT_USAGE
    assert "range too small" in capsys.readouterr().err


def test_cli_returns_usage_code_for_missing_config(tmp_path, capsys):
    exit_code = cli.main(["--config", str(tmp_path / "missing.yaml")])

    assert exit_code == cli.EXIT_USAGE
    assert "Invalid configuration" in capsys.readouterr().err


def test_cli_returns_usage_code_for_non_positive_amount(capsys):
    exit_code = cli.main(["--amount", "0"])

    assert exit_code == cli.EXIT_USAGE
    assert "Invalid configuration" in capsys.readouterr().err


def test_cli_rejects_bounds_outside_safe_integer_range(capsys):
    exit_code = cli.main(["--min", str(-(10**400)), "--max", str(10**400)])

    assert exit_code == cli.EXIT_USAGE
    assert "Invalid configuration" in capsys.readouterr().err
