# capcalc/core/models.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class CalculationInputs:
    area: float = 5.0           # ping
    height: float = 2.8         # m
    is_west_sun: bool = False
    is_tin_roof: bool = False
    is_top_floor: bool = False
    has_large_windows: bool = False
    people_count: int = 2

    def to_json(self) -> Dict[str, Any]:
        return {
            "area": self.area,
            "height": self.height,
            "isWestSun": self.is_west_sun,
            "isTinRoof": self.is_tin_roof,
            "isTopFloor": self.is_top_floor,
            "hasLargeWindows": self.has_large_windows,
            "peopleCount": self.people_count,
        }

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "CalculationInputs":
        # Missing keys fall back to the form defaults
        d = cls()
        return cls(
            area=data.get("area", d.area),
            height=data.get("height", d.height),
            is_west_sun=bool(data.get("isWestSun", d.is_west_sun)),
            is_tin_roof=bool(data.get("isTinRoof", d.is_tin_roof)),
            is_top_floor=bool(data.get("isTopFloor", d.is_top_floor)),
            has_large_windows=bool(data.get("hasLargeWindows", d.has_large_windows)),
            people_count=data.get("peopleCount", d.people_count),
        )


@dataclass(frozen=True)
class CalculationFactors:
    height_multiplier: float = 1.0
    environmental_multiplier: float = 1.0


@dataclass(frozen=True)
class CalculationResults:
    base_kcal: int
    total_kcal: int
    total_watts: int
    recommended_btu: int
    taiwan_tons: float
    factors: CalculationFactors

    def to_json(self) -> Dict[str, Any]:
        return {
            "baseKcal": self.base_kcal,
            "totalKcal": self.total_kcal,
            "totalWatts": self.total_watts,
            "recommendedBTU": self.recommended_btu,
            "taiwanTons": self.taiwan_tons,
            "factors": {
                "heightMultiplier": self.factors.height_multiplier,
                "environmentalMultiplier": self.factors.environmental_multiplier,
            },
        }

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "CalculationResults":
        f = data.get("factors", {})
        return cls(
            base_kcal=int(data["baseKcal"]),
            total_kcal=int(data["totalKcal"]),
            total_watts=int(data["totalWatts"]),
            recommended_btu=int(data["recommendedBTU"]),
            taiwan_tons=float(data["taiwanTons"]),
            factors=CalculationFactors(
                height_multiplier=float(f.get("heightMultiplier", 1.0)),
                environmental_multiplier=float(f.get("environmentalMultiplier", 1.0)),
            ),
        )
