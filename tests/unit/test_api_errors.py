"""Tests for API validation helpers."""

import pytest

from app.services.scoring import InvalidAnswerError
from web.api.errors import (
    ValidationError,
    as_validation_error,
    validate_answers,
    validate_question,
    validate_theme_weights,
)


class TestValidateThemeWeights:
    def test_valid(self):
        validate_theme_weights({"Zorg & Welzijn": 0, "Wonen": 100})

    def test_out_of_range(self):
        with pytest.raises(ValidationError):
            validate_theme_weights({"Wonen": 101})


class TestValidateQuestion:
    def test_strips(self):
        assert validate_question("  Wat met zorg? ") == "Wat met zorg?"

    def test_blank(self):
        with pytest.raises(ValidationError):
            validate_question("   ")


class TestScoringErrors:
    def test_converted(self):
        error = as_validation_error(InvalidAnswerError("Unknown question id '9'"))
        assert isinstance(error, ValidationError)
        assert error.message == "Unknown question id '9'"


class TestValidateAnswers:
    def test_valid(self):
        validate_answers({"1": "agree", "2": " Neutral"})

    def test_unknown(self):
        with pytest.raises(ValidationError):
            validate_answers({"1": "yes"})
