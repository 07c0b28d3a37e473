from pathlib import Path
import subprocess
import sys

import pandas as pd
import pytest

import run_garden

ROOT = Path(__file__).resolve().parents[1]


def test_example_garden_report(capsys):
    run_garden.main([])
    out = capsys.readouterr().out
    assert "Environment: sun=low, wind=medium" in out
    assert "total_yield: 15.82" in out
    assert "total_profit: 47.00" in out


def test_environment_override_and_scenarios(capsys):
    run_garden.main(["--env", "sun=high", "--scenarios"])
    out = capsys.readouterr().out
    assert "total_yield: 38.10" in out
    assert "Yield over 9 scenarios" in out


def test_summary_written_to_csv(tmp_path):
    target = tmp_path / "out" / "summary.csv"
    run_garden.main(["--output", str(target)])
    df = pd.read_csv(target)
    assert df["crop"].tolist() == ["corn", "pumpkin"]
    assert df["profit"].tolist() == [25, 22]


def test_strict_mode_reports_unknown_level(tmp_path):
    factors = tmp_path / "factors.csv"
    factors.write_text("crop,factor,level,percent\ncorn,sun,low,-50\n")
    with pytest.raises(SystemExit) as exc:
        run_garden.main(["--factors", str(factors), "--env", "sun=high", "--strict"])
    assert "high" in str(exc.value.code)


def test_bad_orders_exit_with_message(tmp_path):
    orders = tmp_path / "orders.csv"
    orders.write_text("crop,quantity\ncorn,-3\n")
    with pytest.raises(SystemExit) as exc:
        run_garden.main(["--orders", str(orders)])
    assert "non-negative" in str(exc.value.code)


def test_cli_as_script():
    result = subprocess.run(
        [sys.executable, str(ROOT / "run_garden.py")],
        capture_output=True,
        text=True,
        check=True,
        cwd=ROOT,
    )
    assert "total_profit: 47.00" in result.stdout


def test_unpriced_crops_still_get_a_yield_table(tmp_path, capsys):
    crops = tmp_path / "crops.csv"
    crops.write_text("name,yield,cost,sale_price\ncorn,3,,\npumpkin,4,,\n")
    run_garden.main(["--crops", str(crops)])
    out = capsys.readouterr().out
    assert "corn" in out and "pumpkin" in out
    assert "Totals unavailable" in out
    assert "total_profit" not in out


def test_strict_mode_applies_to_scenarios(tmp_path):
    factors = tmp_path / "factors.csv"
    factors.write_text("crop,factor,level,percent\ncorn,sun,low,-50\n")
    run_garden.main(["--factors", str(factors), "--scenarios"])
    with pytest.raises(SystemExit) as exc:
        run_garden.main(["--factors", str(factors), "--scenarios", "--strict"])
    assert "medium" in str(exc.value.code)
