"""Response models for ``/alerts`` (DWD weather warnings in CAP form)."""

from __future__ import annotations

from enum import StrEnum

from brightsky_client.schemas import BrightSkyModel

# =============================================================================
# CAP enums
# =============================================================================


class AlertStatus(StrEnum):
    ACTUAL = "actual"
    TEST = "test"


class AlertCategory(StrEnum):
    MET = "met"
    HEALTH = "health"


class AlertResponseType(StrEnum):
    PREPARE = "prepare"
    ALL_CLEAR = "allclear"
    NONE = "none"
    MONITOR = "monitor"


class AlertUrgency(StrEnum):
    IMMEDIATE = "immediate"
    FUTURE = "future"


class AlertSeverity(StrEnum):
    MINOR = "minor"
    MODERATE = "moderate"
    SEVERE = "severe"
    EXTREME = "extreme"


class AlertCertainty(StrEnum):
    OBSERVED = "observed"
    LIKELY = "likely"


# =============================================================================
# Records
# =============================================================================


class Alert(BrightSkyModel):
    """
    A single weather warning, with German and English texts.

    ``id`` is Bright Sky's internal id; ``alert_id`` is the CAP message
    identifier and is stable across updates of the same warning.
    """

    id: int
    alert_id: str
    status: AlertStatus
    effective: str
    onset: str
    expires: str | None = None
    category: AlertCategory | None = None
    response_type: AlertResponseType | None = None
    urgency: AlertUrgency | None = None
    severity: AlertSeverity | None = None
    certainty: AlertCertainty | None = None
    event_code: int | None = None
    event_en: str | None = None
    event_de: str | None = None
    headline_en: str
    headline_de: str
    description_en: str
    description_de: str
    instruction_en: str | None = None
    instruction_de: str | None = None


class AlertLocation(BrightSkyModel):
    """The municipality warn cell an alerts query resolved to."""

    warn_cell_id: int
    name: str
    name_short: str
    district: str
    state: str
    state_short: str


class AlertsResponse(BrightSkyModel):
    alerts: list[Alert] = []
    location: AlertLocation | None = None
