import reflex as rx
from typing import List

from motoparts.api.client import ApiError
from motoparts.constants import DEFAULT_ITEMS_PER_PAGE
from motoparts.services.auth_service import AuthService
from motoparts.utils.logger import get_logger
from motoparts.utils.pagination import clamp_page, count_pages, page_numbers, slice_page
from .mixin_state import MixinState, require_admin
from .types import UserRow

logger = get_logger("UsersState")

USER_ROLES: List[str] = ["USER", "ADMIN"]

ADMIN_MESSAGE = "Only administrators can manage users."


class UsersState(MixinState):
    user_items: List[UserRow] = []
    user_page: int = 1
    user_per_page: int = DEFAULT_ITEMS_PER_PAGE
    user_error: str = ""
    user_delete_id: int = 0

    @rx.var
    def user_roles_options(self) -> List[str]:
        return USER_ROLES

    @rx.var
    def user_total_pages(self) -> int:
        return count_pages(len(self.user_items), self.user_per_page)

    @rx.var
    def user_page_items(self) -> List[UserRow]:
        return slice_page(self.user_items, self.user_page, self.user_per_page)

    @rx.var
    def user_page_numbers(self) -> List[int]:
        return page_numbers(self.user_page, self.user_total_pages)

    def _fetch_users(self):
        self.user_error = ""
        try:
            self.user_items = AuthService.list_users(self._api())
        except ApiError as exc:
            self.user_items = []
            return self._api_failure(exc, "user", "Loading users")
        self.user_page = clamp_page(self.user_page, count_pages(len(self.user_items), self.user_per_page))

    @rx.event
    @require_admin(silent=True)
    def load_users(self):
        return self._fetch_users()

    @rx.event
    def user_go_to_page(self, page: int):
        self.user_page = clamp_page(page, count_pages(len(self.user_items), self.user_per_page))

    @rx.event
    @require_admin(ADMIN_MESSAGE)
    def change_user_role(self, user_id: int, role: str):
        role = (role or "").upper()
        if role not in USER_ROLES:
            return rx.toast("Unknown role.", duration=3000)
        current = next((u for u in self.user_items if u["id"] == user_id), None)
        if current is not None and current["role"] == role:
            return
        if current is not None and current["email"] == self.session_user.get("email") and role != "ADMIN":
            return rx.toast("You cannot remove your own admin role.", duration=3000)
        client = self._api()
        try:
            AuthService.update_user_role(client, int(user_id), role)
        except ApiError as exc:
            return self._api_failure(exc, context=f"Updating role of user {user_id}")
        try:
            updated = AuthService.get_user(client, int(user_id))
        except ApiError as exc:
            logger.warning("Reloading user %s failed: %s", user_id, exc.message)
            updated = {**(current or {}), "id": user_id, "role": role}
        self.user_items = [updated if u["id"] == user_id else u for u in self.user_items]
        return rx.toast(f"Role changed to {role.title()}.", duration=3000)

    @rx.event
    def ask_delete_user(self, user_id: int):
        self.user_delete_id = int(user_id)

    @rx.event
    def cancel_delete_user(self):
        self.user_delete_id = 0

    @rx.event
    @require_admin(ADMIN_MESSAGE)
    def delete_user(self):
        user_id = self.user_delete_id
        self.user_delete_id = 0
        if not user_id:
            return
        target = next((u for u in self.user_items if u["id"] == user_id), None)
        if target is not None and target["email"] == self.session_user.get("email"):
            return rx.toast("You cannot delete your own account.", duration=3000)
        try:
            AuthService.delete_user(self._api(), user_id)
        except ApiError as exc:
            return self._api_failure(exc, context=f"Deleting user {user_id}")
        self.user_items = [u for u in self.user_items if u["id"] != user_id]
        self.user_page = clamp_page(self.user_page, count_pages(len(self.user_items), self.user_per_page))
        return rx.toast("User deleted.", duration=3000)
