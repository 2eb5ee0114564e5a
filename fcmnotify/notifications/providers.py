from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import requests

from fcmnotify.config import get_settings
from fcmnotify.models.message import NotificationPayload
from fcmnotify.models.result import SendResult
from fcmnotify.notifications.sender import FCM_SERVICE_URL, FcmNotifier

logger = logging.getLogger(__name__)


class BaseNotificationProvider(ABC):
    name: str = "base"

    @abstractmethod
    def send(self, payload: NotificationPayload, tokens: list[str], data: dict | None = None) -> SendResult:
        raise NotImplementedError


class FCMNotificationProvider(BaseNotificationProvider):
    name = "fcm"

    def __init__(
        self,
        server_key: str,
        session: requests.Session | None = None,
        service_url: str = FCM_SERVICE_URL,
        dry_run: bool = False,
    ) -> None:
        self.server_key = server_key
        self.session = session or requests.Session()
        self.service_url = service_url
        self.dry_run = dry_run

    def build_notifier(self, payload: NotificationPayload, tokens: list[str], data: dict | None = None) -> FcmNotifier:
        notifier = FcmNotifier(self.session, self.server_key, service_url=self.service_url)
        notifier.set_notification(payload).set_dry_run(self.dry_run)
        if len(tokens) == 1:
            notifier.set_target(tokens[0])
        else:
            notifier.set_registration_ids(tokens)
        if data is not None:
            notifier.set_data(data)
        return notifier

    def send(self, payload: NotificationPayload, tokens: list[str], data: dict | None = None) -> SendResult:
        if not self.server_key:
            logger.warning("FCM server key not configured, skipping send", extra={"tokens": len(tokens)})
            return SendResult(failure=len(tokens))
        if not tokens:
            return SendResult()
        return self.build_notifier(payload, tokens, data).send()


def create_provider(session: requests.Session | None = None) -> FCMNotificationProvider:
    settings = get_settings()
    return FCMNotificationProvider(
        settings.fcm_server_key,
        session=session,
        service_url=settings.fcm_service_url,
        dry_run=settings.fcm_dry_run,
    )
