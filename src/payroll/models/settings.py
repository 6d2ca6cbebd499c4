"""Runtime settings."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field


class PayrollSettings(BaseModel):
    """Settings for the interactive session and MCP server."""

    log_level: str = Field(default="WARNING", description="Root logger level name")
    log_file: str | None = Field(default=None, description="Optional log file path")
    currency_symbol: str = Field(default="$", description="Prefix for rendered amounts")

    @classmethod
    def from_env(cls) -> PayrollSettings:
        """Build settings from PAYROLL_* environment variables, keeping defaults for unset ones."""
        values: dict[str, str] = {}
        for field_name in cls.model_fields:
            raw = os.getenv(f"PAYROLL_{field_name.upper()}")
            if raw is not None:
                values[field_name] = raw
        return cls.model_validate(values)
