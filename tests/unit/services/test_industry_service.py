import pytest
from types import SimpleNamespace
from biztime.domain.industries.schemas import IndustryCreateDTO, IndustryAssociateDTO
from biztime.domain.exceptions import InvalidInput
from biztime.services import industry_service
from tests.helper import db_with_flush


def test_group_companies_by_industry_keeps_first_seen_order():
    rows = [
        ("Technology", "Apple Computer"),
        ("Accounting", None),
        ("Technology", "IBM"),
        ("Hardware", "Apple Computer"),
    ]

    grouped = industry_service.group_companies_by_industry(rows)

    assert [g.model_dump(exclude_none=True) for g in grouped] == [
        {"industry": "Technology", "companies": ["Apple Computer", "IBM"]},
        {"industry": "Accounting"},
        {"industry": "Hardware", "companies": ["Apple Computer"]},
    ]


def test_group_companies_by_industry_empty():
    assert industry_service.group_companies_by_industry([]) == []


@pytest.mark.asyncio
async def test_list_industries_groups_join_rows(mocker):
    crud = mocker.patch(
        "biztime.services.industry_service.crud.list_industry_company_names",
        new=mocker.AsyncMock(return_value=[("Technology", "IBM"), ("Technology", "Apple Computer")])
    )
    db = mocker.Mock()

    industries = await industry_service.list_industries(db)

    crud.assert_awaited_once_with(db)
    assert len(industries) == 1
    assert industries[0].companies == ["IBM", "Apple Computer"]


@pytest.mark.asyncio
async def test_create_industry_returns_industry(mocker, auditspan_stub):
    industry = SimpleNamespace(code="tech", industry="Technology")
    crud = mocker.patch(
        "biztime.services.industry_service.crud.create_industry",
        new=mocker.AsyncMock(return_value=industry)
    )
    db = db_with_flush(mocker)

    result = await industry_service.create_industry(db, IndustryCreateDTO(code="tech", industry="Technology"))

    assert result is industry
    crud.assert_awaited_once_with(db, {"code": "tech", "industry": "Technology"})
    db.flush.assert_awaited_once_with()
    assert (auditspan_stub[0].scope, auditspan_stub[0].action) == ("INDUSTRIES", "CREATE")


@pytest.mark.asyncio
async def test_associate_company_inserts_pair(mocker):
    lookup = mocker.patch(
        "biztime.services.industry_service.crud.get_association_id",
        new=mocker.AsyncMock(return_value=None)
    )
    insert = mocker.patch("biztime.services.industry_service.crud.create_association", new=mocker.AsyncMock())
    db = db_with_flush(mocker)

    await industry_service.associate_company(db, "tech", IndustryAssociateDTO(comp_code="apple"))

    lookup.assert_awaited_once_with(db, "apple", "tech")
    insert.assert_awaited_once_with(db, "apple", "tech")
    db.flush.assert_awaited_once_with()


@pytest.mark.asyncio
async def test_associate_company_twice_raises_invalid_input(mocker, auditspan_stub):
    mocker.patch(
        "biztime.services.industry_service.crud.get_association_id",
        new=mocker.AsyncMock(return_value=12)
    )
    insert = mocker.patch("biztime.services.industry_service.crud.create_association", new=mocker.AsyncMock())
    db = db_with_flush(mocker)

    with pytest.raises(InvalidInput) as e:
        await industry_service.associate_company(db, "tech", IndustryAssociateDTO(comp_code="apple"))

    assert str(e.value) == "Industry already associated with that company"
    assert e.value.ctx == {"comp_code": "apple", "ind_code": "tech"}
    insert.assert_not_awaited()
    db.flush.assert_not_awaited()
    assert auditspan_stub[0].exit_args[0] is InvalidInput
