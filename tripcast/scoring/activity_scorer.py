"""Activity scorer: ranks activities for a single day's weather.

Each activity has a table of independent conditions; every condition that
holds adds its points. Totals are not clamped to 100. The reason string
comes from one dominant condition per activity.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from tripcast.models.activity import ACTIVITIES, Activity, ActivityRanking
from tripcast.models.weather import DailyWeather
from tripcast.scoring.weather_codes import (
    CLEAR_CODES,
    POOR_WEATHER_CODES,
    SNOW_CODES,
    THUNDERSTORM_CODES,
)

Condition = Callable[[DailyWeather], bool]


@dataclass(frozen=True)
class ActivityRule:
    conditions: tuple[tuple[Condition, int], ...]
    reason_check: Condition
    reason_if_true: str
    reason_if_false: str


def _mild(w: DailyWeather) -> bool:
    return 10 <= w.temp_max <= 25


RULES: dict[Activity, ActivityRule] = {
    Activity.SKIING: ActivityRule(
        conditions=(
            (lambda w: w.temp_max < 5, 40),
            (lambda w: w.temp_min < 0 and w.precipitation > 0, 30),
            (lambda w: w.weather_code in SNOW_CODES, 20),
            (lambda w: w.wind_speed < 15, 10),
        ),
        reason_check=lambda w: w.temp_max < 5,
        reason_if_true="Cold enough for snow",
        reason_if_false="Too warm",
    ),
    Activity.SURFING: ActivityRule(
        conditions=(
            (lambda w: w.temp_max > 15, 40),
            (lambda w: w.wind_speed > 10, 30),
            (
                lambda w: w.precipitation < 1
                and w.weather_code not in THUNDERSTORM_CODES,
                30,
            ),
        ),
        reason_check=lambda w: w.wind_speed > 10,
        reason_if_true="Good wind for waves",
        reason_if_false="Calm winds",
    ),
    Activity.INDOOR_SIGHTSEEING: ActivityRule(
        conditions=(
            (
                lambda w: w.precipitation > 2
                or w.weather_code in POOR_WEATHER_CODES,
                80,
            ),
        ),
        reason_check=lambda w: w.precipitation > 2,
        reason_if_true="Poor weather favors indoor activities",
        reason_if_false="Weather is fine for outdoors",
    ),
    Activity.OUTDOOR_SIGHTSEEING: ActivityRule(
        conditions=(
            (_mild, 40),
            (lambda w: w.weather_code in CLEAR_CODES, 30),
            (lambda w: w.precipitation < 1, 20),
            (lambda w: w.wind_speed < 10, 10),
        ),
        reason_check=_mild,
        reason_if_true="Mild weather for sightseeing",
        reason_if_false="Uncomfortable temperatures",
    ),
}


def score_activity(activity: Activity, weather: DailyWeather) -> ActivityRanking:
    rule = RULES[activity]
    score = sum(points for condition, points in rule.conditions if condition(weather))
    reason = (
        rule.reason_if_true if rule.reason_check(weather) else rule.reason_if_false
    )
    return ActivityRanking(activity=activity, score=score, reason=reason)


def score(
    weather: DailyWeather, activities: Iterable[Activity] = ACTIVITIES
) -> list[ActivityRanking]:
    """Rank activities for one day, best first.

    Equal scores keep the declaration order of Activity regardless of the
    order ``activities`` is given in.
    """
    order = {a: i for i, a in enumerate(Activity)}
    rankings = [score_activity(a, weather) for a in dict.fromkeys(activities)]
    rankings.sort(key=lambda r: (-r.score, order[r.activity]))
    return rankings
