"""Application controller owning the single AppState.

The controller applies reducer-style actions, persists through the
merge-write use cases and turns failures into notices. How local state
reacts to a failed remote write is configured per action in
``ACTION_ROLLBACK_POLICIES``.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import date, datetime
from enum import Enum

from src.application.ports.document_store import (
    PersistenceError,
    UserDocumentStorePort,
)
from src.application.ports.identity import IdentityError, IdentityPort
from src.application.use_cases import actions
from src.application.use_cases.delete_product import DeleteProductUseCase
from src.application.use_cases.load_user_state import LoadUserStateUseCase
from src.application.use_cases.save_user_state import (
    SaveUserStateUseCase,
    utc_now,
)
from src.application.use_cases.state_document import new_id
from src.application.use_cases.update_profile import UpdateProfileUseCase
from src.domain.constants import Category
from src.domain.models import AppState, TrendTable
from src.domain.services.ledger import build_trend_table
from src.domain.services.plan import PlanSection, available_amount
from src.domain.services.portfolio import category_total, portfolio_total
from src.domain.services.validation import (
    PortfolioValidationError,
    validate_portfolio,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


DEFAULT_NOTICE_SECONDS = 3.0


class RollbackPolicy(str, Enum):
    """What happens to local state when the remote write fails."""

    KEEP_LOCAL = "keep_local"
    REVERT_ON_FAILURE = "revert_on_failure"


ACTION_ROLLBACK_POLICIES = {
    "save": RollbackPolicy.KEEP_LOCAL,
    "delete_product": RollbackPolicy.REVERT_ON_FAILURE,
    "update_profile": RollbackPolicy.KEEP_LOCAL,
}


class NoticeKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notice:
    """Transient banner message."""

    kind: NoticeKind
    message: str
    created_at: float


class AssetHubController:
    """Own the user's AppState and route every action through reducers."""

    def __init__(
        self,
        document_store: UserDocumentStorePort,
        identity: IdentityPort,
        logger=None,
        usage_logger=None,
        clock: Callable[[], float] = time.monotonic,
        save_clock: Callable[[], datetime] = utc_now,
        notice_seconds: float = DEFAULT_NOTICE_SECONDS,
        rollback_policies: dict[str, RollbackPolicy] | None = None,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        """Initialize the controller.

        Args:
            document_store: Port providing the per-user documents.
            identity: Port exposing the signed-in user.
            logger: Optional logger for technical events.
            usage_logger: Optional logger for user actions.
            clock: Monotonic clock used to expire success notices.
            save_clock: Source of ``updatedAt`` timestamps.
            notice_seconds: Lifetime of success notices.
            rollback_policies: Overrides of ACTION_ROLLBACK_POLICIES.
            id_factory: Generator for product and plan item ids.
        """
        self._identity = identity
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()
        self._clock = clock
        self._notice_seconds = notice_seconds
        self._policies = {**ACTION_ROLLBACK_POLICIES, **(rollback_policies or {})}
        self._id_factory = id_factory
        self._load_use_case = LoadUserStateUseCase(document_store, self._logger)
        self._save_use_case = SaveUserStateUseCase(
            document_store,
            self._logger,
            clock=save_clock,
        )
        self._delete_use_case = DeleteProductUseCase(
            document_store,
            self._logger,
            clock=save_clock,
        )
        self._profile_use_case = UpdateProfileUseCase(
            document_store,
            identity,
            self._logger,
            clock=save_clock,
        )
        self._state = AppState()
        self._notice: Notice | None = None

    @property
    def state(self) -> AppState:
        return self._state

    def current_notice(self) -> Notice | None:
        """Return the visible notice; success notices expire."""
        notice = self._notice
        if notice is None:
            return None
        if (
            notice.kind == NoticeKind.SUCCESS
            and self._clock() - notice.created_at >= self._notice_seconds
        ):
            self._notice = None
            return None
        return notice

    def load(self) -> bool:
        """Load the signed-in user's state.

        Returns:
            bool: True when state was loaded, False when auth is unresolved,
            nobody is signed in, or the fetch failed.
        """
        if not self._identity.is_resolved():
            return False
        user_id = self._identity.current_user_id()
        if not user_id:
            self._state = AppState()
            return False
        try:
            self._state = self._load_use_case.execute(user_id)
        except PersistenceError as exc:
            self._logger.error(f"Load failed for user={user_id}: {exc}")
            self._set_notice(NoticeKind.ERROR, "Failed to load asset data.")
            return False
        return True

    # Local actions

    def add_product(self, category: Category) -> str:
        product_id = self._id_factory()
        self._apply("add_product", actions.add_product, category, product_id)
        return product_id

    def update_product(self, category: Category, product_id: str, **changes) -> None:
        self._apply(
            "update_product",
            actions.update_product,
            category,
            product_id,
            **changes,
        )

    def set_memo(self, category: Category, product_id: str, memo: str) -> None:
        self.update_product(category, product_id, memo=memo)

    def clear_memo(self, category: Category, product_id: str) -> None:
        self.update_product(category, product_id, memo="")

    def set_trend_delta(
        self,
        asset_name: str,
        month_key: str,
        raw_value: str | int | None,
    ) -> None:
        self._apply(
            "set_trend_delta",
            actions.set_trend_delta,
            asset_name,
            month_key,
            raw_value,
        )

    def move_trend_row(self, from_index: int, to_index: int) -> None:
        self._apply("move_trend_row", actions.move_trend_row, from_index, to_index)

    def set_plan_income(self, raw_income: str | int | None) -> None:
        self._apply("set_plan_income", actions.set_plan_income, raw_income)

    def add_plan_item(self, section: PlanSection) -> str:
        item_id = self._id_factory()
        self._apply("add_plan_item", actions.add_plan_item, section, item_id)
        return item_id

    def update_plan_item(
        self,
        section: PlanSection,
        item_id: str,
        name: str | None = None,
        amount: str | int | None = None,
    ) -> None:
        self._apply(
            "update_plan_item",
            actions.update_plan_item,
            section,
            item_id,
            name=name,
            amount=amount,
        )

    def remove_plan_item(self, section: PlanSection, item_id: str) -> None:
        self._apply("remove_plan_item", actions.remove_plan_item, section, item_id)

    def record_annual_snapshot(
        self,
        year: int | str,
        month: int | str,
        raw_value: str | int | None,
    ) -> None:
        self._apply(
            "record_annual_snapshot",
            actions.record_annual_snapshot,
            year,
            month,
            raw_value,
        )

    def capture_annual_snapshot(self, today: date) -> None:
        self._apply(
            "capture_annual_snapshot",
            actions.capture_annual_snapshot,
            today,
        )

    # Persisting actions

    def delete_product(self, category: Category, product_id: str) -> bool:
        """Delete a product immediately and persist only the removal.

        Other unsaved edits, including products without a name, stay
        local until the next save.
        """
        previous = self._state
        self._apply("delete_product", actions.delete_product, category, product_id)
        return self._persist(
            "delete_product",
            previous,
            lambda user_id: self._delete_use_case.execute(
                user_id,
                category,
                product_id,
            ),
        )

    def save(self) -> bool:
        """Validate and merge-write the current state.

        Returns:
            bool: True when the write succeeded.
        """
        self._notice = None
        try:
            validate_portfolio(self._state.portfolio)
        except PortfolioValidationError as exc:
            self._logger.warning(f"Save blocked by validation: {exc}")
            self._set_notice(NoticeKind.ERROR, str(exc))
            return False
        return self._persist(
            "save",
            self._state,
            lambda user_id: self._save_use_case.execute(user_id, self._state),
        )

    def update_profile(
        self,
        name: str | None = None,
        gender: str | None = None,
        birth_date: date | str | None = None,
    ) -> bool:
        """Merge profile fields for the signed-in user."""
        self._notice = None
        try:
            profile = self._profile_use_case.execute(
                name=name,
                gender=gender,
                birth_date=birth_date,
            )
        except ValueError as exc:
            self._set_notice(NoticeKind.ERROR, f"Invalid birth date: {exc}")
            return False
        except (IdentityError, PersistenceError) as exc:
            self._logger.error(f"Profile update failed: {exc}")
            self._set_notice(NoticeKind.ERROR, str(exc))
            return False
        self._state = replace(
            self._state,
            profile=replace(
                self._state.profile,
                name=profile.name or self._state.profile.name,
                gender=profile.gender or self._state.profile.gender,
                birth_date=profile.birth_date or self._state.profile.birth_date,
            ),
        )
        self._set_notice(NoticeKind.SUCCESS, "Profile saved.")
        return True

    # Derived views

    def trend_table(self, year: int | str) -> TrendTable:
        return build_trend_table(
            self._state.portfolio,
            self._state.ledger,
            self._state.row_order,
            year,
        )

    def category_totals(self) -> dict[Category, int]:
        return {
            category: category_total(self._state.portfolio, category)
            for category in Category
        }

    def total_assets(self) -> int:
        return portfolio_total(self._state.portfolio)

    def available_amount(self) -> int:
        return available_amount(self._state.plan)

    def _apply(self, action: str, reducer, *args, **kwargs) -> bool:
        """Swap in the reducer result; invalid input leaves state as is."""
        try:
            new_state = reducer(self._state, *args, **kwargs)
        except ValueError as exc:
            self._logger.warning(f"{action} rejected: {exc}")
            self._set_notice(NoticeKind.ERROR, str(exc))
            return False
        self._state = new_state
        self._usage_logger.info(f"action={action}")
        return True

    def _persist(
        self,
        action: str,
        previous: AppState,
        write: Callable[[str], object],
    ) -> bool:
        try:
            user_id = self._identity.current_user_id()
            if not user_id:
                raise IdentityError("Sign-in is required to save.")
            write(user_id)
        except (IdentityError, PersistenceError) as exc:
            policy = self._policies.get(action, RollbackPolicy.KEEP_LOCAL)
            if policy == RollbackPolicy.REVERT_ON_FAILURE:
                self._state = previous
            self._logger.error(
                f"{action} failed ({policy.value}): {exc}"
            )
            self._set_notice(NoticeKind.ERROR, str(exc))
            return False
        self._set_notice(NoticeKind.SUCCESS, "Asset data saved.")
        return True

    def _set_notice(self, kind: NoticeKind, message: str) -> None:
        self._notice = Notice(kind=kind, message=message, created_at=self._clock())


__all__ = [
    "ACTION_ROLLBACK_POLICIES",
    "AssetHubController",
    "Notice",
    "NoticeKind",
    "RollbackPolicy",
]
