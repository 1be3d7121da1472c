from datetime import date
from types import SimpleNamespace


def db_with_flush(mocker):
    db = mocker.Mock()
    db.flush = mocker.AsyncMock()
    db.refresh = mocker.AsyncMock()
    return db


def make_company(code="apple", name="Apple Computer", description="Maker of OSX.", invoices=(), industries=()):
    return SimpleNamespace(
        code=code,
        name=name,
        description=description,
        invoices=list(invoices),
        industries=list(industries)
    )


def make_invoice(
        id=1,
        comp_code="apple",
        amt=100.0,
        paid=False,
        add_date=date(2025, 1, 1),
        paid_date=None,
        company=None
):
    return SimpleNamespace(
        id=id,
        comp_code=comp_code,
        amt=amt,
        paid=paid,
        add_date=add_date,
        paid_date=paid_date,
        company=company
    )
