"""CLI adapter printing the signed-in user's portfolio totals."""

from src.domain.constants import CATEGORY_LABELS
from src.domain.services.parsing import format_won
from src.infrastructure.container import build_controller
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import AssetHubSettings


def main() -> None:
    """Load the user state and print category and plan totals."""
    logger = get_app_logger()
    settings = AssetHubSettings.from_env()
    if settings.user_id is None:
        logger.warning("ASSET_HUB_USER_ID is required to load a portfolio.")
        return

    controller = build_controller(settings)
    if not controller.load():
        notice = controller.current_notice()
        logger.error(notice.message if notice else "Portfolio not loaded.")
        return

    print(f"Portfolio for {settings.user_id}")
    for category, total in controller.category_totals().items():
        count = len(controller.state.portfolio.products(category))
        print(
            f"  {CATEGORY_LABELS[category]}: {format_won(total)} "
            f"({count} products)"
        )
    print(f"Total assets: {format_won(controller.total_assets())}")
    print(
        f"Monthly income: {format_won(controller.state.plan.income)}, "
        f"available after savings: {format_won(controller.available_amount())}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
