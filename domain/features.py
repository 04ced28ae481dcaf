# domain/features.py
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, List, Literal, Mapping, Optional

Importance = Literal["high", "medium", "low"]
Category = Literal["comfort", "safety", "technology", "convenience", "performance"]

CATEGORIES = ("comfort", "safety", "technology", "convenience", "performance")


@dataclass(frozen=True)
class FeatureMeta:
    label: str
    icon: str
    description: str
    importance: Importance
    category: Category


def _f(label, icon, description, importance, category) -> FeatureMeta:
    return FeatureMeta(label, icon, description, importance, category)


FEATURE_CATALOG: Mapping[str, FeatureMeta] = MappingProxyType({
    "heated_seats": _f("Heated Seats", "car-seat-heater",
                       "Seats with built-in heating elements for added comfort in cold weather conditions",
                       "medium", "comfort"),
    "keyless_entry": _f("Keyless Entry", "key-wireless",
                        "Ability to unlock doors without using a traditional key, enhancing convenience",
                        "medium", "convenience"),
    "keyless_start": _f("Keyless Start", "power",
                        "Start the vehicle with the push of a button without inserting a key",
                        "medium", "convenience"),
    "power_mirrors": _f("Power Mirrors", "car-side",
                        "Electrically adjustable side mirrors controlled from inside the vehicle",
                        "low", "convenience"),
    "power_steering": _f("Power Steering", "steering",
                         "System that helps drivers steer the vehicle with reduced effort",
                         "high", "performance"),
    "power_windows": _f("Power Windows", "window-maximize",
                        "Electrically operated windows controlled by switches",
                        "low", "convenience"),
    "backup_camera": _f("Backup Camera", "camera",
                        "Camera providing rear view when reversing to improve safety and visibility",
                        "high", "safety"),
    "bluetooth": _f("Bluetooth", "bluetooth",
                    "Wireless connectivity for phone calls and audio streaming from mobile devices",
                    "medium", "technology"),
    "cruise_control": _f("Cruise Control", "speedometer",
                         "System maintaining a constant vehicle speed set by the driver for comfort on long journeys",
                         "medium", "convenience"),
    "navigation": _f("Navigation System", "map-marker",
                     "Built-in GPS navigation system with real-time directions and mapping",
                     "medium", "technology"),
    "sunroof": _f("Sunroof", "weather-sunny",
                  "Operable roof panel that allows light and fresh air into the vehicle",
                  "low", "comfort"),
    "leather_seats": _f("Leather Seats", "car-seat",
                        "Premium seating surfaces upholstered with leather material for comfort and luxury",
                        "medium", "comfort"),
    "third_row_seats": _f("Third Row Seats", "seat-passenger",
                          "Additional row of seating for more passengers, increasing vehicle capacity",
                          "high", "convenience"),
    "parking_sensors": _f("Parking Sensors", "parking",
                          "Sensors that alert driver of obstacles when parking to prevent collisions",
                          "medium", "safety"),
    "lane_assist": _f("Lane Departure Warning", "road-variant",
                      "System alerting driver when vehicle begins to move out of its lane without signaling",
                      "high", "safety"),
    "blind_spot": _f("Blind Spot Monitoring", "eye-off",
                     "System detecting vehicles in driver's blind spot and providing visual or audible alerts",
                     "high", "safety"),
    "apple_carplay": _f("Apple CarPlay", "apple",
                        "Interface allowing iPhone functionality through the car's display with optimized controls",
                        "medium", "technology"),
    "android_auto": _f("Android Auto", "android",
                       "Interface allowing Android device functionality through the car's display with optimized controls",
                       "medium", "technology"),
    "premium_audio": _f("Premium Audio", "speaker",
                        "High-quality audio system with enhanced speakers and sound processing",
                        "low", "technology"),
    "remote_start": _f("Remote Start", "remote",
                       "Ability to start the vehicle remotely to pre-condition the interior temperature",
                       "medium", "convenience"),
    "adaptive_cruise": _f("Adaptive Cruise Control", "shield-car",
                          "Advanced cruise control that maintains safe following distance from vehicles ahead",
                          "high", "safety"),
    "auto_emergency_braking": _f("Auto Emergency Braking", "car-brake-alert",
                                 "System that automatically applies brakes to prevent or reduce severity of collisions",
                                 "high", "safety"),
    "heads_up_display": _f("Heads-Up Display", "monitor-dashboard",
                           "Projects important driving information onto the windshield in driver's line of sight",
                           "medium", "technology"),
    "wireless_charging": _f("Wireless Charging", "battery-charging-wireless",
                            "Allows compatible devices to charge without plugging in",
                            "low", "technology"),
    "panoramic_roof": _f("Panoramic Roof", "car-convertible",
                         "Extended sunroof that spans much of the vehicle roof for open-air experience",
                         "low", "comfort"),
})

# counted by the environmental score, not part of the display catalog
EFFICIENCY_FEATURES = frozenset({"auto_start_stop", "eco_mode", "regenerative_braking"})


def lookup_feature(feature_id: str) -> FeatureMeta:
    meta = FEATURE_CATALOG.get(feature_id)
    if meta is not None:
        return meta
    label = " ".join(w[:1].upper() + w[1:] for w in str(feature_id).replace("_", " ").split(" "))
    return FeatureMeta(
        label=label,
        icon="car-feature",
        description="Car feature",
        importance="medium",
        category="technology",
    )


def count_features(
    features: Optional[Iterable[str]],
    category: Optional[str] = None,
    importance: Optional[str] = None,
) -> int:
    """
    Number of identifiers in `features` matching the filters.
    With a category/importance filter only cataloged identifiers count.
    """
    if not features:
        return 0
    if category is None and importance is None:
        return len(list(features))
    n = 0
    for f in features:
        meta = FEATURE_CATALOG.get(f)
        if meta is None:
            continue
        if category is not None and meta.category != category:
            continue
        if importance is not None and meta.importance != importance:
            continue
        n += 1
    return n


@dataclass(frozen=True)
class FeatureRow:
    feature_id: str
    meta: FeatureMeta
    has_left: bool
    has_right: bool


def compare_features(
    left: Optional[Iterable[str]],
    right: Optional[Iterable[str]],
    category: Optional[str] = None,
) -> List[FeatureRow]:
    """Union of both feature lists (first-seen order), optionally limited to one category."""
    left_set = list(left or [])
    right_set = list(right or [])
    seen: dict[str, None] = {}
    for f in left_set + right_set:
        seen.setdefault(f, None)

    rows: List[FeatureRow] = []
    for f in seen:
        if category is not None:
            cataloged = FEATURE_CATALOG.get(f)
            if cataloged is None or cataloged.category != category:
                continue
        rows.append(FeatureRow(f, lookup_feature(f), f in left_set, f in right_set))
    return rows
