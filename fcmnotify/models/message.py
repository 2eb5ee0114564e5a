from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

MAX_TTL = 2419200  # 4 weeks, in seconds
FCM_SERVICE_URL = "https://fcm.googleapis.com/fcm/send"


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or value is False or value == 0 or value == [] or value == {}


class NotificationPayload(BaseModel):
    title: str = ""
    body: str = ""
    icon: str = ""
    sound: str = ""
    badge: str = ""
    tag: str = ""
    color: str = ""
    click_action: str = ""
    body_loc_key: str = ""
    body_loc_args: str = ""
    title_loc_key: str = ""
    title_loc_args: str = ""

    def to_wire(self) -> dict[str, str]:
        return {key: value for key, value in self.model_dump().items() if value}


class Message(BaseModel):
    """Body of the POST to the gateway.

    Field names are the gateway's wire keys. Zero values mean "unset" and are
    left out of the serialized body, so an empty message encodes as ``{}``.
    """

    data: Any = None
    to: str = ""
    registration_ids: list[str] = Field(default_factory=list)
    collapse_key: str = ""
    priority: str = ""
    notification: NotificationPayload = Field(default_factory=NotificationPayload)
    content_available: bool = False
    time_to_live: int = 0
    restricted_package_name: str = ""
    dry_run: bool = False
    condition: str = ""

    def to_wire(self) -> dict[str, Any]:
        wire: dict[str, Any] = {}
        if self.data is not None:
            wire["data"] = self.data
        for name in type(self).model_fields:
            if name in {"data", "notification"}:
                continue
            value = getattr(self, name)
            if _is_empty(value):
                continue
            wire[name] = list(value) if isinstance(value, list) else value
        notification = self.notification.to_wire()
        if notification:
            wire["notification"] = notification
        return wire
