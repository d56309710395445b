import pytest

from drivers.policy import (
    DEFAULT_START_POINT,
    SuggestionPolicy,
    default_suggestion_policy,
    policy_from_env,
    start_point_from_env,
)
from geometry import Point

ENV_VARS = [
    "SUGGEST_DETOUR_ANGLE_DEG",
    "SUGGEST_DETOUR_DISTANCE_RATIO",
    "SUGGEST_ANGLE_BUCKET_DEG",
    "SUGGEST_COMPLEXITY_SCALE",
    "START_LAT",
    "START_LON",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_default_policy():
    policy = default_suggestion_policy()

    assert policy.detour_angle_deg == 40
    assert policy.detour_distance_ratio == 0.7
    assert policy.angle_bucket_deg == 10
    assert policy.complexity_scale == 10


@pytest.mark.parametrize(
    "overrides",
    [
        {"detour_angle_deg": -1},
        {"detour_angle_deg": 181},
        {"detour_distance_ratio": -0.1},
        {"angle_bucket_deg": 0},
        {"complexity_scale": 0},
    ],
)
def test_validate_rejects_bad_values(overrides):
    with pytest.raises(ValueError):
        SuggestionPolicy(**overrides).validate()


def test_policy_from_env_without_overrides():
    assert policy_from_env() == SuggestionPolicy()


def test_policy_from_env_reads_overrides(monkeypatch):
    monkeypatch.setenv("SUGGEST_DETOUR_ANGLE_DEG", "30")
    monkeypatch.setenv("SUGGEST_DETOUR_DISTANCE_RATIO", "0.5")
    monkeypatch.setenv("SUGGEST_ANGLE_BUCKET_DEG", "15")
    monkeypatch.setenv("SUGGEST_COMPLEXITY_SCALE", "100")

    assert policy_from_env() == SuggestionPolicy(
        detour_angle_deg=30,
        detour_distance_ratio=0.5,
        angle_bucket_deg=15,
        complexity_scale=100,
    )


def test_policy_from_env_keeps_base_values(monkeypatch):
    monkeypatch.setenv("SUGGEST_COMPLEXITY_SCALE", "100")
    base = SuggestionPolicy(detour_angle_deg=20)

    policy = policy_from_env(base)

    assert policy.detour_angle_deg == 20
    assert policy.complexity_scale == 100


@pytest.mark.parametrize("name, value", [("SUGGEST_DETOUR_ANGLE_DEG", "forty"), ("SUGGEST_ANGLE_BUCKET_DEG", "0")])
def test_policy_from_env_rejects_bad_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValueError):
        policy_from_env()


def test_start_point_defaults():
    assert start_point_from_env() == DEFAULT_START_POINT


def test_start_point_from_env(monkeypatch):
    monkeypatch.setenv("START_LAT", "52.517037")
    monkeypatch.setenv("START_LON", "13.388860")

    assert start_point_from_env() == Point(52.517037, 13.388860)


def test_start_point_needs_both_coordinates(monkeypatch):
    monkeypatch.setenv("START_LAT", "52.517037")

    with pytest.raises(ValueError):
        start_point_from_env()
