"""Authentication and user administration against ``/api/auth``."""
from __future__ import annotations

from typing import Any, Dict, List

from motoparts.api.client import ApiClient, ApiError
from motoparts.api.envelopes import parse_page, unwrap
from motoparts.constants import TOKEN_COOKIE_NAME
from motoparts.schemas.account_schemas import LoginDTO, SignupDTO, UserRoleUpdateDTO
from motoparts.utils.auth import display_name, normalize_role
from motoparts.utils.logger import get_logger

logger = get_logger("AuthService")


class AuthService:
    @staticmethod
    def login(client: ApiClient, email: str, password: str) -> str:
        """
        Signs in and returns the session token set by the backend.

        The token normally arrives as the ``token`` cookie; some deployments
        also echo it in the body.

        Raises:
            ApiError: Bad credentials or backend unreachable
        """
        body = client.post("/api/auth/login", json=LoginDTO(email=email, password=password).to_payload())
        token = client.last_cookies.get(TOKEN_COOKIE_NAME, "")
        if not token and isinstance(body, dict):
            token = str(body.get("token") or body.get("accessToken") or "")
        if not token:
            raise ApiError("Login succeeded but no session token was returned.")
        return token

    @staticmethod
    def current_user(client: ApiClient) -> Dict[str, Any]:
        """Verifies the session with ``/api/auth/me``."""
        payload = unwrap(client.get("/api/auth/me"))
        if not isinstance(payload, dict) or not payload.get("username"):
            raise ApiError("Unexpected response from /api/auth/me.")
        roles = payload.get("role") or payload.get("roles") or []
        if isinstance(roles, str):
            roles = [roles]
        username = str(payload["username"])
        return {
            "username": display_name(username),
            "email": username,
            "roles": [str(role) for role in roles],
        }

    @staticmethod
    def logout(client: ApiClient) -> None:
        client.post("/api/auth/logout")

    @staticmethod
    def signup(client: ApiClient, username: str, email: str, password: str) -> None:
        dto = SignupDTO(user_name=username, email=email, password=password)
        client.post("/api/auth/signup", json=dto.to_payload())

    @staticmethod
    def _user_row(raw: Dict[str, Any]) -> Dict[str, Any]:
        role = raw.get("role") or raw.get("roles") or ""
        if isinstance(role, list):
            role = role[0] if role else ""
        return {
            "id": raw.get("id"),
            "username": str(raw.get("userName") or raw.get("username") or ""),
            "email": str(raw.get("email") or ""),
            "role": normalize_role(str(role)).upper(),
        }

    @staticmethod
    def list_users(client: ApiClient) -> List[Dict[str, Any]]:
        page = parse_page(client.get("/api/auth/users"))
        return [AuthService._user_row(row) for row in page.items]

    @staticmethod
    def get_user(client: ApiClient, user_id: int) -> Dict[str, Any]:
        payload = unwrap(client.get(f"/api/auth/users/{user_id}"))
        if not isinstance(payload, dict):
            raise ApiError("User not found.")
        return AuthService._user_row(payload)

    @staticmethod
    def update_user_role(client: ApiClient, user_id: int, role: str) -> None:
        dto = UserRoleUpdateDTO(roles=(role or "").upper())
        client.put(f"/api/auth/users/{user_id}", json=dto.to_payload())
        logger.info("Role of user %s set to %s", user_id, dto.roles)

    @staticmethod
    def delete_user(client: ApiClient, user_id: int) -> None:
        client.delete(f"/api/auth/users/{user_id}")
        logger.info("User %s deleted", user_id)
