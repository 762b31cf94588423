"""Weather alerts (``/alerts``).

Public API:
  - query: AlertsQueryBuilder
  - models: Alert, AlertLocation, AlertsResponse and the CAP enums
"""

from brightsky_client.datasources.alerts.models import (
    Alert,
    AlertCategory,
    AlertCertainty,
    AlertLocation,
    AlertResponseType,
    AlertsResponse,
    AlertSeverity,
    AlertStatus,
    AlertUrgency,
)
from brightsky_client.datasources.alerts.query import AlertsQueryBuilder

__all__ = [
    "Alert",
    "AlertCategory",
    "AlertCertainty",
    "AlertLocation",
    "AlertResponseType",
    "AlertSeverity",
    "AlertStatus",
    "AlertUrgency",
    "AlertsQueryBuilder",
    "AlertsResponse",
]
