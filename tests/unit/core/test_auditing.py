import json
import pytest
from sqlalchemy.exc import IntegrityError
from redis.exceptions import ConnectionError as RedisConnectionError
from biztime.core import auditing
from biztime.core.auditing import AuditSpan, AuditStatus, audit_emit
from biztime.domain.exceptions import NotFound


@pytest.mark.asyncio
async def test_audit_emit_without_redis_returns_none(mocker):
    mocker.patch("biztime.core.auditing.get_redis", return_value=None)

    result = await audit_emit(scope="COMPANIES", action="CREATE", status=AuditStatus.SUCCESS)

    assert result is None


@pytest.mark.asyncio
async def test_audit_emit_publishes_to_stream(mocker):
    r = mocker.Mock()
    r.xadd = mocker.AsyncMock(return_value="1-0")
    mocker.patch("biztime.core.auditing.get_redis", return_value=r)
    mocker.patch("biztime.core.auditing.AUDIT_STREAM", "test:audit")

    result = await audit_emit(
        scope="INVOICES", action="UPDATE", status=AuditStatus.SUCCESS, object_type="invoice", object_id=5
    )

    assert result == "1-0"
    stream, fields = r.xadd.await_args.args
    payload = json.loads(fields["json"])
    assert stream == "test:audit"
    assert payload["scope"] == "INVOICES"
    assert payload["object_id"] == 5


@pytest.mark.asyncio
async def test_audit_emit_redis_failure_is_logged_not_raised(mocker):
    r = mocker.Mock()
    r.xadd = mocker.AsyncMock(side_effect=RedisConnectionError("down"))
    mocker.patch("biztime.core.auditing.get_redis", return_value=r)

    result = await audit_emit(scope="COMPANIES", action="DELETE", status=AuditStatus.SUCCESS)

    assert result is None


@pytest.mark.asyncio
async def test_audit_span_success(mocker):
    emit = mocker.patch("biztime.core.auditing.audit_emit", new=mocker.AsyncMock())

    async with AuditSpan(scope="COMPANIES", action="CREATE", object_type="company") as span:
        span.object_id = "apple"

    kwargs = emit.await_args.kwargs
    assert kwargs["status"] == AuditStatus.SUCCESS
    assert kwargs["object_id"] == "apple"
    assert kwargs["reason"] is None
    assert "duration_ms" in kwargs["meta"]


@pytest.mark.asyncio
@pytest.mark.parametrize("exc, reason", [
    (NotFound("Company not found"), "Company not found"),
    (IntegrityError("INSERT", {}, Exception("duplicate key")), "Integrity error"),
])
async def test_audit_span_failure_does_not_swallow(mocker, exc, reason):
    emit = mocker.patch("biztime.core.auditing.audit_emit", new=mocker.AsyncMock())

    with pytest.raises(type(exc)):
        async with AuditSpan(scope="COMPANIES", action="DELETE"):
            raise exc

    assert emit.await_args.kwargs["status"] == AuditStatus.FAIL
    assert emit.await_args.kwargs["reason"] == reason


def test_reason_from_exception_none():
    assert auditing._reason_from_exception(None) is None
