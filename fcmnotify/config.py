from __future__ import annotations

import os
from dataclasses import dataclass

from fcmnotify.models.message import FCM_SERVICE_URL


@dataclass(frozen=True)
class Settings:
    fcm_server_key: str = os.getenv("FCM_SERVER_KEY", "").strip()
    fcm_service_url: str = os.getenv("FCM_SERVICE_URL", FCM_SERVICE_URL).strip() or FCM_SERVICE_URL
    fcm_dry_run: bool = os.getenv("FCM_DRY_RUN", "false").lower() == "true"


settings = Settings()


def get_settings() -> Settings:
    return settings
