from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from fcmnotify.models.message import MAX_TTL, Message, NotificationPayload


class MessageBuilder:
    """Accumulates a single :class:`Message` through chained setters.

    Setters only assign fields. Target exclusivity between ``to``,
    ``registration_ids`` and ``condition`` is not checked here; the gateway
    rejects such requests.
    """

    def __init__(self) -> None:
        self.message = Message()

    def set_target(self, to: str) -> MessageBuilder:
        self.message.to = to
        return self

    set_topic = set_target

    def set_registration_ids(self, registration_ids: Iterable[str]) -> MessageBuilder:
        # Copy so later changes to the caller's list do not leak in.
        self.message.registration_ids = list(registration_ids)
        return self

    def set_title(self, value: str) -> MessageBuilder:
        self.message.notification.title = value
        return self

    def set_body(self, value: str) -> MessageBuilder:
        self.message.notification.body = value
        return self

    def set_icon(self, value: str) -> MessageBuilder:
        self.message.notification.icon = value
        return self

    def set_sound(self, value: str) -> MessageBuilder:
        self.message.notification.sound = value
        return self

    def set_badge(self, value: str) -> MessageBuilder:
        self.message.notification.badge = value
        return self

    def set_tag(self, value: str) -> MessageBuilder:
        self.message.notification.tag = value
        return self

    def set_color(self, value: str) -> MessageBuilder:
        self.message.notification.color = value
        return self

    def set_click_action(self, value: str) -> MessageBuilder:
        self.message.notification.click_action = value
        return self

    def set_notification(self, payload: NotificationPayload) -> MessageBuilder:
        self.message.notification = payload.model_copy()
        return self

    def set_collapse_key(self, value: str) -> MessageBuilder:
        """Group collapsible messages so only the latest is delivered on reconnect."""
        self.message.collapse_key = value
        return self

    def set_condition(self, value: str) -> MessageBuilder:
        """Target by topic expression, e.g. ``"'news' in topics || 'cats' in topics"``."""
        self.message.condition = value
        return self

    def set_content_available(self, value: bool) -> MessageBuilder:
        """iOS only: wake an inactive app on delivery."""
        self.message.content_available = value
        return self

    def set_data(self, value: Any) -> MessageBuilder:
        self.message.data = value
        return self

    def set_dry_run(self, value: bool) -> MessageBuilder:
        """Ask the gateway to validate the request without delivering it."""
        self.message.dry_run = value
        return self

    def set_high_priority(self) -> MessageBuilder:
        self.message.priority = "high"
        return self

    def set_restricted_package_name(self, value: str) -> MessageBuilder:
        """Only deliver to registration tokens of this application package."""
        self.message.restricted_package_name = value
        return self

    def set_time_to_live(self, seconds: int) -> MessageBuilder:
        """Seconds the gateway keeps the message for an offline device.

        Values above ``MAX_TTL`` are clamped. Negative values are stored as given.
        """
        self.message.time_to_live = MAX_TTL if seconds > MAX_TTL else seconds
        return self

    set_ttl = set_time_to_live
