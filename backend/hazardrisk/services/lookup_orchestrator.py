"""
Risk lookup orchestration.

One submission runs one LookupSession through

    IDLE -> VALIDATING -> RESOLVING_LOCATION -> FETCHING_RISK -> SUCCESS
                 \\                \\                   \\
                  +----------------+-------------------+--> FAILED

The geocoder and the NRI service are called strictly in sequence and the
first failure ends the session. Only one session runs at a time per
orchestrator; a new submission replaces the previous session outright.
"""

import re
from dataclasses import dataclass
from enum import Enum

import structlog

from hazardrisk.errors import (
    GENERIC_ERROR_MESSAGE,
    InputValidationError,
    LookupInProgressError,
    RiskLookupError,
)
from hazardrisk.models.location import CountyLocation
from hazardrisk.models.risk import CountyRiskRecord
from hazardrisk.services.location_resolver import LocationResolver
from hazardrisk.services.risk_data_fetcher import RiskDataFetcher

logger = structlog.get_logger()

_ZIP_RE = re.compile(r"[0-9]{5}")


class LookupState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    RESOLVING_LOCATION = "resolving_location"
    FETCHING_RISK = "fetching_risk"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class LookupSession:
    """State of a single ZIP lookup."""

    zip_code: str
    state: LookupState = LookupState.IDLE
    location: CountyLocation | None = None
    record: CountyRiskRecord | None = None
    error: RiskLookupError | None = None
    failed_at: LookupState | None = None

    @property
    def succeeded(self) -> bool:
        return self.state == LookupState.SUCCESS

    @property
    def failed(self) -> bool:
        return self.state == LookupState.FAILED

    @property
    def error_message(self) -> str | None:
        return self.error.message if self.error else None

    def fail(self, error: RiskLookupError) -> None:
        self.failed_at = self.state
        self.state = LookupState.FAILED
        self.error = error
        self.record = None


def validate_zip(zip_code: str) -> str:
    """Return the trimmed ZIP code, or raise if it isn't exactly 5 ASCII digits."""
    cleaned = (zip_code or "").strip()
    if not _ZIP_RE.fullmatch(cleaned):
        raise InputValidationError()
    return cleaned


class RiskLookupOrchestrator:
    """Runs ZIP -> county -> NRI record lookups, one at a time."""

    def __init__(
        self,
        resolver: LocationResolver | None = None,
        fetcher: RiskDataFetcher | None = None,
    ):
        self._resolver = resolver or LocationResolver()
        self._fetcher = fetcher or RiskDataFetcher()
        self._session: LookupSession | None = None
        self._busy = False

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def session(self) -> LookupSession | None:
        return self._session

    async def submit(self, zip_code: str) -> LookupSession:
        """
        Run a full lookup for *zip_code* and return the finished session.

        Failures never raise: they end the session in FAILED with the
        error's message. Unexpected exceptions are logged and replaced by
        a generic message.

        Raises:
            LookupInProgressError: a lookup is already running.
        """
        if self._busy:
            raise LookupInProgressError()

        session = LookupSession(zip_code=zip_code)
        self._session = session
        self._busy = True
        try:
            session.state = LookupState.VALIDATING
            session.zip_code = validate_zip(zip_code)

            session.state = LookupState.RESOLVING_LOCATION
            session.location = await self._resolver.resolve(session.zip_code)

            session.state = LookupState.FETCHING_RISK
            session.record = await self._fetcher.fetch(session.location.fips)

            session.state = LookupState.SUCCESS
            logger.info(
                "Risk lookup complete",
                zip_code=session.zip_code,
                fips=session.location.fips,
            )
        except RiskLookupError as e:
            logger.warning(
                "Risk lookup failed",
                zip_code=session.zip_code,
                stage=session.state.value,
                error=e.message,
            )
            session.fail(e)
        except Exception:
            logger.exception("Unexpected error during risk lookup", zip_code=session.zip_code)
            session.fail(RiskLookupError(GENERIC_ERROR_MESSAGE))
        finally:
            self._busy = False

        return session

    def reset(self) -> None:
        """Discard the current session."""
        self._session = None

    async def close(self):
        self.reset()
        await self._resolver.close()
        await self._fetcher.close()
