"""CLI adapter printing the monthly trend table for one year."""

from src.domain.models import TrendTable
from src.infrastructure.container import build_controller
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import AssetHubSettings


def _format_change(value: int | None) -> str:
    """Format a month-over-month change; the first month has none."""
    if value is None:
        return "-"
    sign = "+" if value > 0 else ""
    return f"{sign}{value:,}"


def render_trend_table(table: TrendTable) -> list[str]:
    """Render the trend table as plain text lines.

    Args:
        table: Trend table built by the controller.

    Returns:
        list[str]: One line per asset row, then totals and changes.
    """
    months = [month[-2:] for month in table.months]
    lines = ["Asset | " + " | ".join(months)]
    for row in table.rows:
        cells = " | ".join(f"{delta:,}" for delta in row.deltas)
        lines.append(f"{row.asset_name} ({row.category}) | {cells}")
        balances = " | ".join(f"{value:,}" for value in row.running_balances)
        lines.append(f"  balance | {balances}")
    lines.append("Total | " + " | ".join(f"{value:,}" for value in table.totals))
    lines.append(
        "Change | " + " | ".join(_format_change(value) for value in table.changes)
    )
    return lines


def main() -> None:
    """Load the user state and print the trend table."""
    logger = get_app_logger()
    settings = AssetHubSettings.from_env()
    if settings.user_id is None:
        logger.warning("ASSET_HUB_USER_ID is required to build the trend table.")
        return

    controller = build_controller(settings)
    if not controller.load():
        notice = controller.current_notice()
        logger.error(notice.message if notice else "Trend data not loaded.")
        return

    table = controller.trend_table(settings.trend_year)
    print(f"Trend table {settings.trend_year} for {settings.user_id}")
    for line in render_trend_table(table):
        print(line)


if __name__ == "__main__":  # pragma: no cover
    main()
