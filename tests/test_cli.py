"""Tests for the typer CLI."""

import pytest
from typer.testing import CliRunner

from catalogue_cli import DEMOS, app


runner = CliRunner()


def test_list_shows_every_demo():
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    assert result.output.split() == list(DEMOS)


@pytest.mark.parametrize("name", sorted(DEMOS))
def test_every_demo_runs(name):
    result = runner.invoke(app, ["demo", name])
    assert result.exit_code == 0, result.output
    assert result.output.strip()


def test_unknown_demo():
    result = runner.invoke(app, ["demo", "monostate"])
    assert result.exit_code == 1


def test_dispense_default_chain():
    result = runner.invoke(app, ["dispense", "3700"])
    assert result.exit_code == 0
    assert "Dispensing 3 x 500 note(s)" in result.output
    assert "leftover Rs. 0" in result.output


def test_dispense_reports_leftover():
    result = runner.invoke(app, ["dispense", "3750"])
    assert result.exit_code == 0
    assert "Amount should be in multiples of 100" in result.output
    assert "leftover Rs. 50" in result.output


def test_dispense_custom_denominations():
    result = runner.invoke(app, ["dispense", "80", "-d", "50", "-d", "20", "-d", "10"])
    assert result.exit_code == 0
    assert "Dispensing 1 x 50 note(s)" in result.output
    assert "Dispensing 1 x 20 note(s)" in result.output
    assert "Dispensing 1 x 10 note(s)" in result.output


def test_dispense_denominations_from_environment(monkeypatch):
    monkeypatch.setenv("CATALOGUE_DENOMINATIONS", "[10, 50]")
    result = runner.invoke(app, ["dispense", "70"])
    assert result.exit_code == 0
    assert "Dispensing 1 x 50 note(s)" in result.output
    assert "Dispensing 2 x 10 note(s)" in result.output


def test_dispense_rejects_unordered_denominations():
    result = runner.invoke(app, ["dispense", "100", "-d", "10", "-d", "50"])
    assert result.exit_code == 2


def test_dispense_negative_amount():
    result = runner.invoke(app, ["dispense", "--", "-100"])
    assert result.exit_code == 2


def test_cost_with_addons():
    result = runner.invoke(app, ["cost", "5.0", "-n", "Coffee", "-a", "Milk=1.5", "-a", "Sugar=0.5",
                                 "-a", "Whipped Cream=2.0"])
    assert result.exit_code == 0
    assert "Coffee, Milk, Sugar, Whipped Cream" in result.output
    assert "Total: 9.0" in result.output


def test_cost_without_addons():
    result = runner.invoke(app, ["cost", "5.0"])
    assert result.exit_code == 0
    assert "Total: 5.0" in result.output


@pytest.mark.parametrize("addon", ["Milk", "=1.5", "Milk=-1"])
def test_cost_rejects_bad_addons(addon):
    result = runner.invoke(app, ["cost", "5.0", "--add", addon])
    assert result.exit_code == 2


def test_verbose_flag_runs():
    result = runner.invoke(app, ["--verbose", "dispense", "100"])
    assert result.exit_code == 0
