"""Runtime settings contracts."""

from __future__ import annotations

from pydantic import BaseModel, field_validator


class InstallSettings(BaseModel):
    model_config = {"frozen": True}

    package_manager: str = "npm"
    git_executable: str = "git"
    skip_install: bool = False

    @field_validator("package_manager", "git_executable")
    @classmethod
    def validate_executable(cls, value: str) -> str:
        candidate = value.strip()
        if not candidate:
            raise ValueError("executable name must not be empty")
        return candidate
