import pytest
from types import SimpleNamespace
from pydantic import ValidationError
from biztime.domain.companies.schemas import CompanyCreateDTO, CompanyPutDTO, CompanyDetailsDTO


test_company_payload = {
    "code": "apple",
    "name": "Apple Computer",
    "description": "Maker of OSX."
}


@pytest.mark.parametrize("missing", ["code", "name", "description"])
def test_create_missing_field_raises(missing):
    payload = {k: v for k, v in test_company_payload.items() if k != missing}
    with pytest.raises(ValidationError) as e:
        CompanyCreateDTO(**payload)
    assert e.value.errors()[0]["loc"] == (missing,)
    assert e.value.errors()[0]["type"] == "missing"


@pytest.mark.parametrize("field", ["code", "name", "description"])
def test_create_blank_field_raises(field):
    with pytest.raises(ValidationError):
        CompanyCreateDTO(**{**test_company_payload, field: "   "})


def test_create_strips_whitespace():
    dto = CompanyCreateDTO(**{**test_company_payload, "name": "  Apple Computer "})
    assert dto.name == "Apple Computer"


def test_create_code_with_slash_raises():
    with pytest.raises(ValidationError):
        CompanyCreateDTO(**{**test_company_payload, "code": "app/le"})


def test_put_does_not_accept_code_change():
    dto = CompanyPutDTO(**test_company_payload)
    assert "code" not in dto.model_dump()


def test_details_accepts_plain_ids_and_names():
    company = SimpleNamespace(**test_company_payload, invoices=[1, 2], industries=["Technology"])
    dto = CompanyDetailsDTO.model_validate(company)
    assert dto.invoices == [1, 2]
    assert dto.industries == ["Technology"]
