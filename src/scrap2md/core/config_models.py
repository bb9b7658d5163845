"""
Purpose: Typed configuration models with validation.
Constraints: Pure models; no file I/O or side effects.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ZennSettings(BaseModel):
    model_config = ConfigDict(extra="allow")
    base_url: str = "https://zenn.dev"
    signin_path: str = "/enter"
    session_cookie_name: str = "_zenn_session"
    cookie_env: str = "ZENN_COOKIE"
    http_timeout: float = Field(default=30.0, gt=0)

    @property
    def signin_url(self) -> str:
        return self.base_url.rstrip("/") + self.signin_path

    def blob_url(self, slug: str) -> str:
        return f"{self.base_url.rstrip('/')}/api/scraps/{slug}/blob.json"


class SeleniumSettings(BaseModel):
    model_config = ConfigDict(extra="allow")
    webdriver_url: str = "http://localhost:9515"
    headless: bool = False
    settle_seconds: float = Field(default=2.0, ge=0)


class ExportSettings(BaseModel):
    model_config = ConfigDict(extra="allow")
    skip_header: bool = False
    style: Literal["flat", "quote"] = "flat"
    interactive_login: bool = True
