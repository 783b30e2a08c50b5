"""
Interactive lookup state for one front-end instance.

Created when the view mounts, reset on every new submission and closed on
teardown. Holds the ZIP input text, the active tab, the expanded hazard card
and the orchestrator whose session is the single result slot.
"""

from enum import Enum

import structlog

from hazardrisk.models.hazard import HazardType
from hazardrisk.services.lookup_orchestrator import LookupSession, RiskLookupOrchestrator
from hazardrisk.services.risk_report import RiskReport, build_risk_report

logger = structlog.get_logger()

ZIP_LENGTH = 5
SUBMIT_KEY = "Enter"


class Tab(str, Enum):
    CALCULATOR = "calculator"
    METHODOLOGY = "methodology"


def sanitize_zip_input(raw: str) -> str:
    """Keep ASCII digits only, truncated to five characters."""
    return "".join(ch for ch in (raw or "") if "0" <= ch <= "9")[:ZIP_LENGTH]


class SessionController:
    def __init__(self, orchestrator: RiskLookupOrchestrator | None = None):
        self._orchestrator = orchestrator or RiskLookupOrchestrator()
        self.zip_input = ""
        self.active_tab = Tab.CALCULATOR
        self.expanded_hazard: HazardType | None = None
        self.has_searched = False

    @property
    def busy(self) -> bool:
        return self._orchestrator.busy

    @property
    def session(self) -> LookupSession | None:
        return self._orchestrator.session

    @property
    def error_message(self) -> str | None:
        session = self.session
        return session.error_message if session else None

    @property
    def report(self) -> RiskReport | None:
        """Display model of the last lookup, only when it succeeded."""
        session = self.session
        if session is None or not session.succeeded:
            return None
        return build_risk_report(session.zip_code, session.location, session.record)

    def set_zip_input(self, raw: str) -> str:
        self.zip_input = sanitize_zip_input(raw)
        return self.zip_input

    def select_tab(self, tab: Tab | str) -> Tab:
        self.active_tab = Tab(tab)
        return self.active_tab

    def toggle_hazard(self, hazard: HazardType | str) -> HazardType | None:
        hazard = HazardType(hazard)
        self.expanded_hazard = None if self.expanded_hazard == hazard else hazard
        return self.expanded_hazard

    async def submit(self) -> LookupSession | None:
        """Look up the current input; ignored (returns None) while a lookup is running."""
        if self.busy:
            logger.info("Submission ignored, lookup in progress", zip_code=self.zip_input)
            return None
        self.expanded_hazard = None
        self.has_searched = True
        return await self._orchestrator.submit(self.zip_input)

    async def handle_key(self, key: str) -> LookupSession | None:
        if key == SUBMIT_KEY:
            return await self.submit()
        return None

    async def close(self):
        """Tear down: discard all state and release HTTP clients."""
        self.zip_input = ""
        self.expanded_hazard = None
        self.has_searched = False
        await self._orchestrator.close()
