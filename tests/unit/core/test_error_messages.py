import pytest
from biztime.api.exceptions import describe_validation_errors, _status_for
from biztime.domain.exceptions import AppError, NotFound, InvalidInput


def test_describe_missing_fields():
    errors = [
        {"type": "missing", "loc": ("body", "name"), "msg": "Field required"},
        {"type": "missing", "loc": ("body", "description"), "msg": "Field required"},
    ]
    assert describe_validation_errors(errors) == "Require name, description in request"


def test_describe_invalid_and_missing_fields():
    errors = [
        {"type": "missing", "loc": ("body", "paid"), "msg": "Field required"},
        {"type": "greater_than", "loc": ("body", "amt"), "msg": "Input should be greater than 0"},
    ]
    assert describe_validation_errors(errors) == (
        "Require paid in request. Invalid amt: Input should be greater than 0"
    )


def test_describe_invalid_path_param():
    errors = [{"type": "int_parsing", "loc": ("path", "invoice_id"), "msg": "Input should be a valid integer"}]
    assert describe_validation_errors(errors) == "Invalid invoice_id: Input should be a valid integer"


def test_describe_missing_body():
    assert describe_validation_errors([{"type": "missing", "loc": ("body",), "msg": "Field required"}]) == (
        "Require body in request"
    )


@pytest.mark.parametrize("exc, expected", [
    (NotFound("x"), 404),
    (InvalidInput("x"), 400),
    (AppError("x"), 400),
])
def test_status_for(exc, expected):
    assert _status_for(exc) == expected
