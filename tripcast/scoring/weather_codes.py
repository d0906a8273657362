"""WMO weather interpretation codes: rule groups and display names."""

CLEAR_CODES: frozenset[int] = frozenset({0, 1, 2, 3})
FOG_CODES: frozenset[int] = frozenset({45, 48})
DRIZZLE_CODES: frozenset[int] = frozenset({51, 53, 55, 56, 57})
RAIN_CODES: frozenset[int] = frozenset({61, 63, 65, 66, 67})
SNOW_CODES: frozenset[int] = frozenset({71, 73, 75, 77, 85, 86})
SHOWER_CODES: frozenset[int] = frozenset({80, 81, 82})
THUNDERSTORM_CODES: frozenset[int] = frozenset({95, 96, 99})

# Conditions that push activities indoors
POOR_WEATHER_CODES: frozenset[int] = (
    FOG_CODES | DRIZZLE_CODES | RAIN_CODES | THUNDERSTORM_CODES
)

CODE_GROUPS: dict[str, frozenset[int]] = {
    "clear": CLEAR_CODES,
    "fog": FOG_CODES,
    "drizzle": DRIZZLE_CODES,
    "rain": RAIN_CODES,
    "snow": SNOW_CODES,
    "showers": SHOWER_CODES,
    "thunderstorm": THUNDERSTORM_CODES,
}

DESCRIPTIONS: dict[int, str] = {
    0: "Sunny",
    1: "Mainly Sunny",
    2: "Partly Cloudy",
    3: "Cloudy",
    45: "Foggy",
    48: "Rime Fog",
    51: "Light Drizzle",
    53: "Drizzle",
    55: "Heavy Drizzle",
    56: "Light Freezing Drizzle",
    57: "Freezing Drizzle",
    61: "Light Rain",
    63: "Rain",
    65: "Heavy Rain",
    66: "Light Freezing Rain",
    67: "Freezing Rain",
    71: "Light Snow",
    73: "Snow",
    75: "Heavy Snow",
    77: "Snow Grains",
    80: "Light Showers",
    81: "Showers",
    82: "Heavy Showers",
    85: "Light Snow Showers",
    86: "Snow Showers",
    95: "Thunderstorm",
    96: "Light Thunderstorms With Hail",
    99: "Thunderstorm With Hail",
}


def code_group(code: int) -> str | None:
    """Return the group name for a WMO code, or None if it is unclassified."""
    for name, codes in CODE_GROUPS.items():
        if code in codes:
            return name
    return None


def describe_weather_code(code: int) -> str:
    return DESCRIPTIONS.get(code, "Unknown")
