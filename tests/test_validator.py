"""Tests for batch validation, summaries and the validator session."""
import pytest

from param_shell.errors import NotReadyError
from param_shell.models import ParameterResult, ValidationSummary, success_rate
from param_shell.validator import ParameterValidator, summarize, validate_all


def test_validate_all_preserves_input_order(sample_data):
    names = ["zip", "age", "nothing", "city"]
    results = validate_all(names, sample_data)
    assert [r.parameter for r in results] == names
    assert [r.found for r in results] == [False, True, False, True]


def test_validate_all_reports_similar_matches(sample_data):
    (result,) = validate_all(["zip"], sample_data)
    assert result == ParameterResult(
        parameter="zip",
        found=False,
        similar_matches=["user.address.zipCode"],
    )


def test_validate_all_empty_names():
    assert validate_all([], {"a": 1}) == []


def test_validate_all_without_properties():
    for data in ({}, [], None, 42, ["a", "b"]):
        results = validate_all(["a", "b"], data)
        assert [r.found for r in results] == [False, False]
        assert all(r.similar_matches == [] for r in results)


def test_unrelated_name_is_missing_without_suggestions(sample_data):
    (result,) = validate_all(["qqq"], sample_data)
    assert result.found is False
    assert result.similar_matches == []


def test_duplicate_names_are_checked_each_time(sample_data):
    results = validate_all(["age", "age"], sample_data)
    assert len(results) == 2
    assert all(r.found for r in results)


def test_parameter_result_to_dict():
    result = ParameterResult("a", True, ["x.a"])
    assert result.to_dict() == {"parameter": "a", "found": True, "similarMatches": ["x.a"]}


# ---------------------------------------------------------------------------
# summary
# ---------------------------------------------------------------------------

def test_summarize(sample_data):
    summary = summarize(validate_all(["age", "zip", "city"], sample_data))
    assert summary == ValidationSummary(
        total=3, found=2, missing=1, success_rate=67, missing_parameters=["zip"],
    )


def test_summarize_empty():
    summary = summarize([])
    assert summary.total == 0
    assert summary.success_rate == 0
    assert summary.missing_parameters == []


@pytest.mark.parametrize("found,total,expected", [
    (0, 4, 0),
    (1, 3, 33),
    (2, 3, 67),
    (1, 8, 13),
    (4, 4, 100),
])
def test_success_rate_rounds_half_up(found, total, expected):
    assert success_rate(found, total) == expected


# ---------------------------------------------------------------------------
# ParameterValidator
# ---------------------------------------------------------------------------

def test_validator_loads_both_files(data_file, conditions_file):
    validator = ParameterValidator(data_file, conditions_file)
    assert validator.is_ready()
    assert validator.conditions == ["age", "age", "city", "city", "zip", "zip"]
    assert "user.address.zipCode" in validator.properties


def test_validator_validate(data_file, conditions_file):
    results = ParameterValidator(data_file, conditions_file).validate()
    summary = summarize(results)
    assert summary.found == 4
    assert summary.missing == 2
    assert summary.success_rate == 67
    assert summary.missing_parameters == ["zip", "zip"]


def test_validator_missing_data_is_not_ready(tmp_path, conditions_file):
    validator = ParameterValidator(str(tmp_path / "absent.json"), conditions_file)
    assert validator.data is None
    assert validator.properties == []
    assert not validator.is_ready()
    with pytest.raises(NotReadyError):
        validator.validate()


def test_validator_without_conditions_is_not_ready(data_file, tmp_path):
    empty = tmp_path / "empty.js"
    empty.write_text("// nothing here\n")
    validator = ParameterValidator(data_file, str(empty))
    assert validator.conditions == []
    with pytest.raises(NotReadyError):
        validator.validate()


def test_validator_check_and_find(data_file):
    validator = ParameterValidator(data_file)
    assert validator.check("userName").exact_match is True
    assert validator.find("total") == ["orders[0].total", "orders[1].total"]


def test_reloading_data_resets_properties(data_file, tmp_path):
    validator = ParameterValidator(data_file)
    assert "active" in validator.properties

    other = tmp_path / "other.json"
    other.write_text('{"only": {"key": 1}}')
    assert validator.load_data(str(other)) is True
    assert validator.properties == ["only", "only.key"]


def test_custom_marker(data_file, tmp_path):
    conditions = tmp_path / "rules.txt"
    conditions.write_text("@age and $city and @active")
    validator = ParameterValidator(data_file, str(conditions), marker="@")
    assert validator.conditions == ["age", "active"]


def test_validate_reuses_cached_properties(data_file, conditions_file, monkeypatch):
    import param_shell.validator as validator_module

    validator = ParameterValidator(data_file, conditions_file)
    cached = validator.properties
    calls = []
    real_flatten = validator_module.flatten_properties
    monkeypatch.setattr(
        validator_module, "flatten_properties",
        lambda *a, **kw: calls.append(a) or real_flatten(*a, **kw),
    )
    first = validator.validate()
    second = validator.validate()
    assert calls == []
    assert first == second
    assert validator.properties is cached
    assert first == validate_all(validator.conditions, validator.data)
