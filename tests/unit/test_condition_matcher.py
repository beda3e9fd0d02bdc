"""Unit tests for condition matching (user/vendor/category/amount predicates)."""

import pytest

from homeops.application.services.condition_matcher import (
    AutomationConditions,
    data_value,
    matches,
    parse_conditions,
)
from homeops.domain.exceptions import ValidationException


def test_no_conditions_always_match() -> None:
    """None or an empty condition set matches any data."""
    assert matches(None, {}) is True
    assert matches(None, {"amount": 5}) is True
    assert matches({}, {"userId": "u1"}) is True


def test_user_ids_membership() -> None:
    """user_ids requires data userId to be listed."""
    conditions = {"userIds": ["u1", "u2"]}
    assert matches(conditions, {"userId": "u1"}) is True
    assert matches(conditions, {"userId": "u3"}) is False
    assert matches(conditions, {}) is False


def test_empty_user_ids_is_no_constraint() -> None:
    """An empty list imposes no constraint."""
    assert matches({"userIds": []}, {"userId": "anyone"}) is True
    assert matches({"user_ids": []}, {}) is True


def test_vendor_ids_membership() -> None:
    """vendor_ids works like user_ids, keyed on vendorId."""
    conditions = {"vendor_ids": ["v1"]}
    assert matches(conditions, {"vendorId": "v1"}) is True
    assert matches(conditions, {"vendor_id": "v1"}) is True
    assert matches(conditions, {"vendorId": "v2"}) is False


def test_task_categories_passes_when_category_absent() -> None:
    """Events without a category are not filtered by task_categories."""
    conditions = {"taskCategories": ["CLEANING"]}
    assert matches(conditions, {}) is True
    assert matches(conditions, {"category": "CLEANING"}) is True
    assert matches(conditions, {"category": "GARDEN"}) is False


def test_amount_bounds_are_inclusive() -> None:
    """min_amount and max_amount include their boundaries."""
    conditions = {"minAmount": 100, "maxAmount": 200}
    assert matches(conditions, {"amount": 100}) is True
    assert matches(conditions, {"amount": 200}) is True
    assert matches(conditions, {"amount": 150.5}) is True
    assert matches(conditions, {"amount": 99.99}) is False
    assert matches(conditions, {"amount": 200.01}) is False


def test_min_amount_rejects_smaller_amount() -> None:
    """minAmount 100 rejects amount 50."""
    assert matches({"minAmount": 100}, {"amount": 50}) is False


def test_amount_missing_or_non_numeric_is_unconstrained() -> None:
    """No amount, or an amount that is not a number, passes both bounds."""
    assert matches({"minAmount": 10}, {}) is True
    assert matches({"minAmount": 100, "maxAmount": 500}, {"amount": "abc"}) is True
    assert matches({"maxAmount": 10}, {"amount": True}) is True
    assert matches({"minAmount": 10}, {"amount": ["5"]}) is True


def test_numeric_string_amount_is_compared() -> None:
    assert matches({"minAmount": 10}, {"amount": "25"}) is True
    assert matches({"minAmount": 10}, {"amount": " 5 "}) is False


def test_all_predicates_must_pass() -> None:
    """Predicates combine with AND."""
    conditions = {"userIds": ["u1"], "minAmount": 10}
    assert matches(conditions, {"userId": "u1", "amount": 20}) is True
    assert matches(conditions, {"userId": "u1", "amount": 5}) is False
    assert matches(conditions, {"userId": "u2", "amount": 20}) is False


def test_unknown_condition_keys_ignored() -> None:
    """Keys the matcher does not know do not affect the result."""
    assert matches({"weatherIs": "sunny", "userIds": ["u1"]}, {"userId": "u1"}) is True


def test_parse_conditions_accepts_both_casings() -> None:
    """snake_case and camelCase keys parse to the same model."""
    a = parse_conditions({"min_amount": 5, "user_ids": ["x"]})
    b = parse_conditions({"minAmount": 5, "userIds": ["x"]})
    assert isinstance(a, AutomationConditions)
    assert a == b
    assert parse_conditions(None) is None


def test_parse_conditions_malformed_raises_validation_exception() -> None:
    """A wrong shape (e.g. userIds not a list) raises ValidationException."""
    with pytest.raises(ValidationException) as exc_info:
        parse_conditions({"userIds": "u1"})
    assert exc_info.value.details == {"field": "conditions"}


def test_data_value_prefers_snake_case() -> None:
    """data_value reads snake_case first and falls back to camelCase."""
    assert data_value({"user_id": "a", "userId": "b"}, "user_id") == "a"
    assert data_value({"userId": "b"}, "user_id") == "b"
    assert data_value({}, "user_id") is None
