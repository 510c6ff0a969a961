"""
Decides once per page load whether the external verification widget works.

The check waits a fixed grace period first so a slow third-party script can
finish rendering before the fallback preempts it. The decision is cached:
there is no polling and no retry.
"""

from __future__ import annotations

import asyncio
from typing import Optional

from infrastructure.captcha.protocol import WidgetHost
from shared.logging import get_logger

log = get_logger(__name__)


class VerificationAvailabilityDetector:
    def __init__(self, host: WidgetHost, grace_period_seconds: float = 3.0) -> None:
        self._host = host
        self._grace_period = grace_period_seconds
        self._decision: Optional[bool] = None

    @property
    def decided(self) -> bool:
        return self._decision is not None

    def is_external_available(self) -> bool:
        if self._decision is not None:
            return self._decision

        widget = self._host.lookup_widget()
        if widget is None:
            reason = "api_missing"
        elif not callable(getattr(widget, "get_response", None)):
            reason = "response_getter_missing"
        elif not self._host.container_rendered():
            reason = "not_rendered"
        else:
            reason = None

        self._decision = reason is None
        if reason:
            log.warning("external_verification_unavailable", reason=reason)
        else:
            log.info("external_verification_available")
        return self._decision

    async def wait_and_check(self) -> bool:
        """Wait out the grace period (first call only), then decide."""
        if self._decision is None:
            await asyncio.sleep(self._grace_period)
        return self.is_external_available()
