"""Answer contracts collected from the user."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field, field_validator


class ModuleFormat(StrEnum):
    COMMONJS = "CommonJS"
    ES6 = "ES6"


def normalize_out_dir(out_dir: str) -> str:
    """Use forward slashes and drop trailing slashes: ``"a\\\\b\\\\"`` -> ``"a/b"``."""
    return out_dir.replace("\\", "/").rstrip("/")


class BasicAnswers(BaseModel):
    model_config = {"frozen": True, "populate_by_name": True}

    name: str
    out_dir: str = Field(default="dist", alias="outDir")
    git_init: bool = Field(default=False, alias="gitInit")
    advanced_mode: bool = Field(default=False, alias="advancedMode")

    @field_validator("name", "out_dir", mode="before")
    @classmethod
    def strip_text(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value:
            raise ValueError("project name must not be empty")
        return value

    @field_validator("out_dir")
    @classmethod
    def validate_out_dir(cls, value: str) -> str:
        if not normalize_out_dir(value):
            raise ValueError("output dir must not be empty or '/'")
        return value


class AdvancedAnswers(BaseModel):
    model_config = {"frozen": True, "populate_by_name": True}

    module_format: ModuleFormat = Field(default=ModuleFormat.COMMONJS, alias="moduleFormat")
    strict: bool = True
    use_prettier: bool = Field(default=True, alias="usePrettier")
    use_eslint: bool = Field(default=True, alias="useEslint")
    use_jest: bool = Field(default=False, alias="useJest")


DEFAULT_ADVANCED_ANSWERS = AdvancedAnswers()


class ScaffoldAnswers(BaseModel):
    """Full answer set as stored in an answers file."""

    model_config = {"frozen": True, "populate_by_name": True}

    basic: BasicAnswers
    advanced: AdvancedAnswers = DEFAULT_ADVANCED_ANSWERS
