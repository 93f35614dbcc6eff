import reflex as rx
from typing import Dict

from motoparts.api.client import ApiError
from motoparts.services.dashboard_service import DashboardService
from .mixin_state import MixinState, require_login

EMPTY_STATS: Dict[str, float] = {
    "today_sales": 0.0,
    "monthly_revenue": 0.0,
    "today_expenses": 0.0,
    "monthly_expenses": 0.0,
    "monthly_net": 0.0,
}


class DashboardState(MixinState):
    dashboard_stats: Dict[str, float] = EMPTY_STATS
    dashboard_error: str = ""

    @rx.var
    def dashboard_cards(self) -> Dict[str, str]:
        return {key: self._format_currency(value) for key, value in self.dashboard_stats.items()}

    @rx.event
    @require_login
    def load_dashboard(self):
        self.dashboard_error = ""
        try:
            self.dashboard_stats = DashboardService.load_stats(
                self._api(), include_expenses=self._has_role("ADMIN")
            )
        except ApiError as exc:
            self.dashboard_stats = EMPTY_STATS
            return self._api_failure(exc, "dashboard", "Dashboard figures")
