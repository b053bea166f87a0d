from __future__ import annotations

from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

BASE = datetime(2024, 1, 1, tzinfo=timezone.utc)


def day(n: int) -> datetime:
    return BASE + timedelta(days=n)


def herd_rows() -> list[tuple[UUID, str, datetime]]:
    cow_a, cow_b = uuid4(), uuid4()
    return [
        (cow_a, "CALVING", day(0)),
        (cow_a, "INSEMINATION", day(60)),
        (cow_a, "INSEMINATION", day(90)),
        (cow_a, "CALVING", day(370)),
        (cow_b, "CALVING", day(10)),
        (cow_b, "INSEMINATION", day(80)),
        (cow_b, "CALVING", day(360)),
        # Ignored by the KPI engine
        (cow_b, "HEAT", day(75)),
    ]


async def test_health(client):
    resp = await client.get("/api/v1/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


async def test_breeding_kpi_requires_tenant_header(client):
    resp = await client.get("/api/v1/kpi/breeding")
    assert resp.status_code == 403
    assert resp.json()["code"] == "forbidden"


async def test_breeding_kpi_rejects_invalid_tenant(client):
    resp = await client.get("/api/v1/kpi/breeding", headers={"X-Tenant-ID": "not-a-uuid"})
    assert resp.status_code == 403


async def test_breeding_kpi_for_period(client, tenant_headers, seed_events, tenant_id: UUID):
    await seed_events(tenant_id, herd_rows())
    # Another tenant's herd must not leak into the result
    await seed_events(uuid4(), herd_rows())

    resp = await client.get(
        "/api/v1/kpi/breeding",
        params={"from": "2024-01-01T00:00:00Z", "to": "2025-02-04T00:00:00Z"},
        headers=tenant_headers,
    )
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["metrics"] == {
        "conception_rate": 66.7,
        "avg_days_open": 80,
        "avg_calving_interval": 360,
        "ai_per_conception": 1.5,
    }
    assert body["counts"] == {
        "inseminations": 3,
        "conceptions": 2,
        "calvings": 4,
        "pairs_for_days_open": 2,
        "total_events": 7,
    }
    assert body["insights"] == [
        "Conception rate is good (60% or higher)",
        "Days open are well managed (90 days or less)",
        "AI efficiency is good (1.5 or fewer per conception)",
    ]


async def test_breeding_kpi_without_events(client, tenant_headers):
    resp = await client.get(
        "/api/v1/kpi/breeding",
        params={"from": "2024-01-01T00:00:00Z", "to": "2024-06-30T00:00:00Z", "locale": "ja"},
        headers=tenant_headers,
    )
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["metrics"] == {
        "conception_rate": None,
        "avg_days_open": None,
        "avg_calving_interval": None,
        "ai_per_conception": None,
    }
    assert body["counts"]["total_events"] == 0
    assert body["insights"] == ["期間内に繁殖イベントがありません"]


async def test_breeding_kpi_rejects_inverted_range(client, tenant_headers):
    resp = await client.get(
        "/api/v1/kpi/breeding",
        params={"from": "2024-06-01T00:00:00Z", "to": "2024-01-01T00:00:00Z"},
        headers=tenant_headers,
    )
    assert resp.status_code == 422
    assert resp.json()["code"] == "validation_error"


async def test_breeding_trends(client, tenant_headers, seed_events, tenant_id: UUID):
    await seed_events(tenant_id, herd_rows())

    resp = await client.get(
        "/api/v1/kpi/breeding/trends",
        params={"from_month": "2024-01", "to_month": "2024-12"},
        headers=tenant_headers,
    )
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert [p["month"] for p in body["series"]][:3] == ["2024-01", "2024-02", "2024-03"]
    assert len(body["series"]) == 12
    assert len(body["deltas"]) == 12
    assert set(body["deltas"][0]["changes"].values()) == {"unknown"}
    assert sum(p["counts"]["inseminations"] for p in body["series"]) == 3
    assert body["overall_trend"]["confidence"] == "high"
    assert body["overall_trend"]["direction"] in {"improving", "declining", "stable", "mixed"}
    assert body["summary"].startswith("12-month analysis")


async def test_breeding_trends_validates_months(client, tenant_headers):
    resp = await client.get(
        "/api/v1/kpi/breeding/trends", params={"months": 0}, headers=tenant_headers
    )
    assert resp.status_code == 422
    assert resp.json()["code"] == "validation_error"


async def test_breeding_delta(client, tenant_headers, seed_events, tenant_id: UUID):
    await seed_events(tenant_id, herd_rows())

    resp = await client.get(
        "/api/v1/kpi/breeding/delta",
        params={"from": "2024-12-01T00:00:00Z", "to": "2025-01-31T23:59:59Z"},
        headers=tenant_headers,
    )
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["current"]["ai_per_conception"] == 1.5
    assert body["current"]["avg_calving_interval"] == 360
    assert body["previous"] == {
        "conception_rate": None,
        "avg_days_open": None,
        "avg_calving_interval": None,
        "ai_per_conception": None,
    }
    assert set(body["changes"].values()) == {"unknown"}
    assert body["summary"] == {"improvement": "neutral", "key_changes": []}
