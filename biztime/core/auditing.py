import json
import logging
import time
from datetime import timezone, datetime
from typing import Any, Mapping
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from redis.exceptions import RedisError
from biztime.core.config import AUDIT_STREAM
from biztime.core.ctx import get_redis, get_request_id, get_route, get_client_ip
from biztime.domain.exceptions import AppError


logger = logging.getLogger("biztime.audit")


class AuditStatus:
    SUCCESS = "SUCCESS"
    FAIL = "FAIL"


async def audit_emit(
    *,
    scope: str,
    action: str,
    status: str,
    object_type: str | None = None,
    object_id: str | int | None = None,
    reason: str | None = None,
    meta: Mapping[str, Any] | None = None
) -> str | None:
    payload = {
        "request_id": get_request_id(),
        "scope": scope,
        "action": action,
        "status": status,
        "actor_ip": get_client_ip(),
        "route": get_route(),
        "object_type": object_type,
        "object_id": object_id,
        "reason": reason,
        "meta": dict(meta or {}),
    }
    log = logger.info if status == AuditStatus.SUCCESS else logger.warning
    log("%s %s %s", scope, action, status, extra={"audit": payload})

    r = get_redis()
    if not r:
        return None
    try:
        return await r.xadd(AUDIT_STREAM, {"json": json.dumps(payload, default=str)})
    except RedisError:
        logger.exception("Audit publish failed", extra={"scope": scope, "action": action})
        return None


def _reason_from_exception(exception: BaseException | None) -> str | None:
    if exception is None:
        return None
    if isinstance(exception, AppError):
        return str(exception)
    if isinstance(exception, IntegrityError):
        return "Integrity error"
    if isinstance(exception, SQLAlchemyError):
        return "Store error"
    return str(exception)


class AuditSpan:
    """
    Wraps one mutating operation and emits a single audit event when it finishes.

    The outcome is FAIL whenever the block raises; the exception is never suppressed.
    ``object_id`` may be assigned inside the block once the store has generated it.
    """

    def __init__(self, *, scope: str, action: str,
                 object_type: str | None = None, object_id: str | int | None = None,
                 meta: Mapping[str, Any] | None = None):
        self.scope = scope
        self.action = action
        self.object_type = object_type
        self.object_id = object_id
        self.meta = dict(meta or {})
        self._t0 = 0.0

    async def __aenter__(self):
        self._t0 = time.perf_counter()
        started = datetime.now(timezone.utc)
        self.meta.setdefault("occurred_at", started.isoformat(timespec="milliseconds").replace("+00:00", "Z"))
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.meta["duration_ms"] = int((time.perf_counter() - self._t0) * 1000)
        status = AuditStatus.FAIL if exc else AuditStatus.SUCCESS
        await audit_emit(
            scope=self.scope, action=self.action, status=status,
            object_type=self.object_type, object_id=self.object_id,
            reason=_reason_from_exception(exc), meta=self.meta
        )
        return False
