"""End-to-end CLI runs against an in-memory provider."""

from datetime import date, datetime

import pytest
from typer.testing import CliRunner

from spotpricelogic import cli, exceptions
from spotpricelogic.types import Zone

runner = CliRunner()


class FakeProvider:
    def __init__(self, by_day=None, error=None):
        self.by_day = by_day or {}
        self.error = error
        self.calls = []

    def fetch_prices(self, day, zone):
        self.calls.append((day, zone))
        if self.error:
            raise self.error
        return self.by_day.get(day, ())


@pytest.fixture
def use_provider(monkeypatch):
    def install(fake):
        monkeypatch.setattr(cli, "get_provider", lambda config: fake)
        return fake

    return install


def test_default_mode_prints_min_max_mean(use_provider, series_of):
    day = series_of([0.30, 0.10, 0.50, 0.10] + [0.25] * 20)
    use_provider(FakeProvider({date(2025, 3, 10): day}))
    res = runner.invoke(cli.app, ["--zone", "SE3", "--date", "2025-03-10"])
    assert res.exit_code == 0, res.output
    assert res.output.splitlines() == [
        "Lägsta pris: 01-02 10,00 öre",
        "Högsta pris: 02-03 50,00 öre",
        "Medelpris: 25 öre",
    ]


def test_sorted_mode(use_provider, series_of):
    day = series_of([0.30, 0.10, 0.30] + [0.90] * 21)
    use_provider(FakeProvider({date(2025, 3, 10): day}))
    res = runner.invoke(cli.app, ["--zone", "se3", "--date", "2025-03-10", "--sorted"])
    assert res.exit_code == 0, res.output
    lines = res.output.splitlines()
    assert len(lines) == 24
    assert lines[:3] == [
        "01-02 10,00 öre",
        "00-01 30,00 öre",
        "02-03 30,00 öre",
    ]
    assert lines[-1] == "23-00 90,00 öre"


def test_sorted_mode_empty_prints_brackets(use_provider):
    use_provider(FakeProvider())
    res = runner.invoke(cli.app, ["--zone", "SE1", "--date", "2025-03-10", "--sorted"])
    assert res.exit_code == 0
    assert res.output.strip() == "[]"


def test_charging_mode_uses_tomorrow(use_provider, series_of):
    today = series_of([0.5] * 23 + [0.1], start=datetime(2025, 3, 10))
    tomorrow = series_of([0.1] + [0.5] * 23, start=datetime(2025, 3, 11))
    fake = use_provider(FakeProvider({date(2025, 3, 10): today, date(2025, 3, 11): tomorrow}))
    res = runner.invoke(cli.app, ["--zone", "SE4", "--date", "2025-03-10", "--charging", "2h"])
    assert res.exit_code == 0, res.output
    assert res.output.splitlines() == [
        "Påbörja laddning kl 23:00",
        "Medelpris för fönster: 10 öre",
    ]
    assert fake.calls == [(date(2025, 3, 10), Zone.SE4), (date(2025, 3, 11), Zone.SE4)]


def test_charging_mode_ignores_same_day_echo(use_provider, series_of):
    today = series_of([0.5] * 23 + [0.1], start=datetime(2025, 3, 10))
    echo = series_of([0.0] * 24, start=datetime(2025, 3, 10))
    use_provider(FakeProvider({date(2025, 3, 10): today, date(2025, 3, 11): echo}))
    res = runner.invoke(cli.app, ["--zone", "SE4", "--date", "2025-03-10", "--charging", "2h"])
    assert res.exit_code == 0, res.output
    assert res.output.splitlines()[0] == "Påbörja laddning kl 22:00"


def test_no_data(use_provider):
    use_provider(FakeProvider())
    res = runner.invoke(cli.app, ["--zone", "SE2", "--date", "2025-03-10"])
    assert res.exit_code == 0
    assert res.output.strip() == cli.NO_DATA


@pytest.mark.parametrize(
    "args",
    [
        ["--zone", "SE9"],
        ["--zone", "SE3", "--date", "10/03/2025"],
        ["--zone", "SE3", "--date", "20250310"],
        ["--zone", "SE3", "--date", "2025-W11-1"],
        ["--zone", "SE3", "--charging", "3h"],
        [],
    ],
)
def test_bad_arguments_exit_2(use_provider, args):
    use_provider(FakeProvider())
    res = runner.invoke(cli.app, args)
    assert res.exit_code == 2


def test_provider_failure_exits_1(use_provider):
    use_provider(FakeProvider(error=exceptions.ProviderError("boom")))
    res = runner.invoke(cli.app, ["--zone", "SE3", "--date", "2025-03-10"])
    assert res.exit_code == 1
