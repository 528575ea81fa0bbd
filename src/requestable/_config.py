from os import environ as env
from typing import Optional

from pydantic import BaseModel, Field

from ._utils.constants import (
    ENV_ACCESS_TOKEN,
    ENV_BASE_URL,
    ENV_PASSWORD,
    ENV_USERNAME,
)
from .models.auth import AuthStrategy, BasicAuth, BearerAuth, NoAuth
from .models.errors import BaseUrlMissingError


class Config(BaseModel):
    base_url: str
    access_token: Optional[str] = Field(default=None, repr=False)
    username: Optional[str] = None
    password: Optional[str] = Field(default=None, repr=False)

    @classmethod
    def from_env(
        cls,
        base_url: Optional[str] = None,
        access_token: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
    ) -> "Config":
        """Resolve configuration from arguments, falling back to environment variables.

        Raises:
            BaseUrlMissingError: Neither ``base_url`` nor ``REQUESTABLE_URL`` is set.
        """
        base_url_value = base_url or env.get(ENV_BASE_URL)
        if not base_url_value:
            raise BaseUrlMissingError()

        return cls(
            base_url=base_url_value,
            access_token=access_token or env.get(ENV_ACCESS_TOKEN),
            username=username or env.get(ENV_USERNAME),
            password=password or env.get(ENV_PASSWORD),
        )

    def auth_strategy(self) -> AuthStrategy:
        if self.access_token:
            return BearerAuth(self.access_token)
        if self.username:
            return BasicAuth(self.username, self.password or "")
        return NoAuth()
