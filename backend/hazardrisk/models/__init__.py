from hazardrisk.models.hazard import HazardInfo, HazardType, HAZARD_INFO
from hazardrisk.models.location import CountyLocation
from hazardrisk.models.risk import CountyRiskRecord, HazardRisk, NRI_FIELDS

__all__ = [
    "HazardInfo",
    "HazardType",
    "HAZARD_INFO",
    "CountyLocation",
    "CountyRiskRecord",
    "HazardRisk",
    "NRI_FIELDS",
]
