from __future__ import annotations

import logging
from typing import Any, Dict

from ..lib.service_manager import ServiceManager

logger = logging.getLogger(__name__)


class ReloadServiceManagerStep:
    step_id = "40_reload_service_manager"
    phase = "MANAGER_RELOADED"

    def __init__(self, manager: ServiceManager) -> None:
        self.manager = manager

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        # Registration only; starting the unit is up to the operator.
        self.manager.reload()
        state.setdefault("execution", {}).setdefault("decisions", {})["service_manager_reloaded"] = True
        logger.info("Service manager reloaded")
        return state
