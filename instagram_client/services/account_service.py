"""
Profile and access-token workflows built on top of client adapters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from instagram_client.models import RefreshedToken, TokenInfo, UserProfile


class AccountClient(Protocol):
    """Protocol subset consumed by the service."""

    def get_user_profile(self) -> Any:
        ...

    def get_token_info(self) -> Any:
        ...

    def refresh_access_token(self) -> Any:
        ...

    def set_access_token(self, access_token: str) -> None:
        ...


@dataclass(slots=True)
class AccountService:
    """Typed access to the profile and token endpoints."""

    client: AccountClient

    def get_profile(self) -> UserProfile:
        return UserProfile.from_api(self.client.get_user_profile())

    def get_token_info(self) -> TokenInfo:
        return TokenInfo.from_api(self.client.get_token_info())

    def refresh_token(self, *, apply: bool = False) -> RefreshedToken:
        """
        Extend the lifetime of the current token.

        Args:
            apply: Install the returned token on the client before returning.
                The client keeps its old token otherwise.

        Returns:
            RefreshedToken with the new token and its lifetime in seconds
        """
        refreshed = RefreshedToken.from_api(self.client.refresh_access_token())
        if apply:
            self.client.set_access_token(refreshed.access_token)
        return refreshed
