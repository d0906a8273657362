"""Tests for WMO code grouping and descriptions."""

from tripcast.scoring.weather_codes import (
    CODE_GROUPS,
    DESCRIPTIONS,
    POOR_WEATHER_CODES,
    code_group,
    describe_weather_code,
)


class TestCodeGroups:
    def test_exact_membership(self):
        assert CODE_GROUPS["clear"] == {0, 1, 2, 3}
        assert CODE_GROUPS["fog"] == {45, 48}
        assert CODE_GROUPS["drizzle"] == {51, 53, 55, 56, 57}
        assert CODE_GROUPS["rain"] == {61, 63, 65, 66, 67}
        assert CODE_GROUPS["snow"] == {71, 73, 75, 77, 85, 86}
        assert CODE_GROUPS["showers"] == {80, 81, 82}
        assert CODE_GROUPS["thunderstorm"] == {95, 96, 99}

    def test_groups_disjoint_and_cover_descriptions(self):
        seen: set[int] = set()
        for codes in CODE_GROUPS.values():
            assert not seen & codes
            seen |= codes
        assert seen == set(DESCRIPTIONS)

    def test_poor_weather_excludes_showers_and_snow(self):
        assert 80 not in POOR_WEATHER_CODES
        assert 73 not in POOR_WEATHER_CODES
        assert {45, 51, 61, 95} <= POOR_WEATHER_CODES

    def test_code_group(self):
        assert code_group(73) == "snow"
        assert code_group(81) == "showers"
        assert code_group(4) is None


class TestDescriptions:
    def test_known(self):
        assert describe_weather_code(0) == "Sunny"
        assert describe_weather_code(99) == "Thunderstorm With Hail"

    def test_unknown(self):
        assert describe_weather_code(42) == "Unknown"
