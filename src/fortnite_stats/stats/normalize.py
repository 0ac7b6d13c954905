from __future__ import annotations

from fortnite_stats.providers.base.adapter import StatsNormalizer
from fortnite_stats.providers.base.errors import UpstreamDataError
from fortnite_stats.providers.base.types import Json, PayloadShape, PlayerStats
from fortnite_stats.providers.fortnite_api.normalizer import FortniteApiNormalizer
from fortnite_stats.providers.fortniteapi_io.normalizer import FortniteApiIoNormalizer

NORMALIZERS: dict[PayloadShape, StatsNormalizer] = {
    PayloadShape.A: FortniteApiNormalizer(),
    PayloadShape.B: FortniteApiIoNormalizer(),
}


def detect_shape(payload: Json) -> PayloadShape | None:
    if "data" in payload:
        return PayloadShape.A
    if "global_stats" in payload or "account" in payload:
        return PayloadShape.B
    return None


def normalize(payload: Json, shape: PayloadShape | None = None) -> PlayerStats:
    """Normalize a raw provider payload, picking the strategy from its top-level keys unless forced."""

    resolved = shape or detect_shape(payload)
    if resolved is None:
        raise UpstreamDataError("Response carries neither `data` nor `account` stats")
    return NORMALIZERS[resolved].normalize(payload)
