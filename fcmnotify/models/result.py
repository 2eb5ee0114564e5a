from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator


class GatewayResponse(BaseModel):
    multicast_id: int = 0
    success: int = 0
    failure: int = 0
    canonical_ids: int = 0
    results: list[dict[str, str]] = Field(default_factory=list)
    message_id: int = 0
    error: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        # JSON null leaves the field at its zero value.
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class SendResult(GatewayResponse):
    """Outcome of a single send.

    ``ok`` is the overall success flag; ``success``/``failure`` are the
    per-target counts reported by the gateway.
    """

    ok: bool = False
    status_code: int = 0

    @property
    def has_failures(self) -> bool:
        return self.failure > 0 or bool(self.error)

    def failed_results(self) -> list[dict[str, str]]:
        return [item for item in self.results if item.get("error")]
