"""Tests for the trend report CLI adapter."""

from unittest.mock import MagicMock

from src.adapters import trend_report_cli
from src.domain.models import TrendRow, TrendTable
from src.infrastructure.container import build_controller
from src.infrastructure.document_store import InMemoryUserDocumentStore
from src.infrastructure.settings import AssetHubSettings


def test_format_change() -> None:
    """The first month shows a dash, gains a plus sign."""
    assert trend_report_cli._format_change(None) == "-"
    assert trend_report_cli._format_change(1500) == "+1,500"
    assert trend_report_cli._format_change(-20) == "-20"
    assert trend_report_cli._format_change(0) == "0"


def test_render_trend_table_lines() -> None:
    """Rows, balances, totals and changes are rendered in order."""
    table = TrendTable(
        months=["2024-01", "2024-02"],
        rows=[
            TrendRow(
                row_key="pension:IRP",
                category="pension",
                asset_name="IRP",
                deltas=[1000, -200],
                running_balances=[1000, 800],
            )
        ],
        totals=[1000, -200],
        changes=[None, -1200],
    )

    lines = trend_report_cli.render_trend_table(table)

    assert lines == [
        "Asset | 01 | 02",
        "IRP (pension) | 1,000 | -200",
        "  balance | 1,000 | 800",
        "Total | 1,000 | -200",
        "Change | - | -1,200",
    ]


def test_main_prints_table_for_configured_year(monkeypatch, capsys):
    """main loads the user and prints the configured year's table."""
    settings = AssetHubSettings(store="memory", user_id="u1", trend_year=2024)
    store = InMemoryUserDocumentStore(
        {
            "u1": {
                "assets": {"pension": [{"id": "p1", "name": "IRP"}]},
                "trendDeltas": {"IRP": {"2024-03": 700}},
            }
        }
    )
    monkeypatch.setattr(
        trend_report_cli.AssetHubSettings,
        "from_env",
        classmethod(lambda cls: settings),
    )
    monkeypatch.setattr(
        trend_report_cli,
        "build_controller",
        lambda resolved: build_controller(resolved, document_store=store),
    )
    monkeypatch.setattr(trend_report_cli, "get_app_logger", MagicMock)

    trend_report_cli.main()

    output = capsys.readouterr().out
    assert "Trend table 2024 for u1" in output
    assert "IRP (pension) | 0 | 0 | 700 | 0" in output
    assert "Change | - | 0 | +700 | -700" in output
