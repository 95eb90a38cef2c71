"""Record Routes: HTTP mapping of add/verify/get/total and error envelopes.

Invariants:
    - POST /records returns 201 {"id": n}; owner comes from the identity header
    - Verification needs an allowlisted identity header (403 otherwise)
    - Unknown, negative and malformed ids return 404 RECORD_NOT_FOUND
    - Every failure body is {"error": {"code", ...}}
"""

import pytest

OWNER = "alice"


def as_identity(identity: str) -> dict[str, str]:
    return {"X-Ledger-Identity": identity}


async def _add(client, body, owner=OWNER):
    res = await client.post("/api/v1/records", json=body, headers=as_identity(owner))
    assert res.status_code == 201, res.text
    return res.json()["id"]


# ─── add_record ──────────────────────────────────────────────────

async def test_add_record_returns_id_zero_then_total_one(client, record_body):
    res = await client.post(
        "/api/v1/records", json=record_body, headers=as_identity(OWNER),
    )

    assert res.status_code == 201
    assert res.json() == {"id": 0}
    total = await client.get("/api/v1/records/total")
    assert total.json() == {"total_records": 1}


async def test_add_record_sets_owner_from_identity_header(client, record_body):
    record_id = await _add(client, record_body, owner="bob")

    res = await client.get(f"/api/v1/records/{record_id}")
    assert res.json()["owner"] == "bob"


async def test_add_record_without_identity_is_unauthorized(client, record_body):
    res = await client.post("/api/v1/records", json=record_body)

    assert res.status_code == 403
    assert res.json()["error"]["code"] == "UNAUTHORIZED"
    assert (await client.get("/api/v1/records/total")).json()["total_records"] == 0


async def test_add_record_missing_field_is_invalid_input(client, record_body):
    record_body.pop("title")

    res = await client.post(
        "/api/v1/records", json=record_body, headers=as_identity(OWNER),
    )

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "INVALID_INPUT"
    assert any(d["field"].endswith("title") for d in error["details"])


async def test_add_record_blank_text_is_invalid_input(client, record_body):
    record_body["employer_name"] = "   "

    res = await client.post(
        "/api/v1/records", json=record_body, headers=as_identity(OWNER),
    )

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_INPUT"


@pytest.mark.parametrize(
    "bad",
    ["2020-13-45", 0, 1577836800, "2020-01-01T00:00:00", "20200101", "2020-W01-1"],
)
async def test_add_record_malformed_date_is_invalid_input(client, record_body, bad):
    record_body["start_date"] = bad

    res = await client.post(
        "/api/v1/records", json=record_body, headers=as_identity(OWNER),
    )

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_INPUT"
    assert (await client.get("/api/v1/records/total")).json()["total_records"] == 0


async def test_add_record_timestamp_end_date_is_invalid_input(client, record_body):
    record_body["end_date"] = "2021-01-01T00:00:00"

    res = await client.post(
        "/api/v1/records", json=record_body, headers=as_identity(OWNER),
    )

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_INPUT"


async def test_add_record_end_before_start_is_invalid_input(client, record_body):
    record_body["end_date"] = "2019-06-01"

    res = await client.post(
        "/api/v1/records", json=record_body, headers=as_identity(OWNER),
    )

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "INVALID_INPUT"
    assert error["field"] == "end_date"
    assert (await client.get("/api/v1/records/total")).json()["total_records"] == 0


async def test_add_record_ongoing_without_end_date(client, record_body):
    record_body.pop("end_date")
    record_id = await _add(client, record_body)

    res = await client.get(f"/api/v1/records/{record_id}")
    assert res.json()["end_date"] is None


# ─── get_record ──────────────────────────────────────────────────

async def test_get_record_returns_public_view(client, record_body):
    record_id = await _add(client, record_body)

    res = await client.get(f"/api/v1/records/{record_id}")

    assert res.status_code == 200
    body = res.json()
    assert body["id"] == 0
    assert body["employer_name"] == "Acme"
    assert body["title"] == "Engineer"
    assert body["start_date"] == "2020-01-01"
    assert body["end_date"] == "2021-01-01"
    assert body["verified"] is False
    assert body["verifier"] is None
    assert body["state"] == "unverified"


async def test_get_record_on_empty_registry_is_not_found(client):
    res = await client.get("/api/v1/records/999")

    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RECORD_NOT_FOUND"
    assert res.json()["error"]["context"]["record_id"] == 999


async def test_get_record_negative_and_malformed_ids_are_not_found(client, record_body):
    await _add(client, record_body)

    for raw in ("-1", "abc", "0x0", "1.0", "99999999999999999999999"):
        res = await client.get(f"/api/v1/records/{raw}")
        assert res.status_code == 404, raw
        assert res.json()["error"]["code"] == "RECORD_NOT_FOUND"


async def test_get_record_zero_padded_ids_are_not_found(client, record_body):
    for _ in range(2):
        await _add(client, record_body)

    for raw in ("00", "01", "007"):
        res = await client.get(f"/api/v1/records/{raw}")
        assert res.status_code == 404, raw
    assert (await client.get("/api/v1/records/1")).status_code == 200


# ─── verify_record ───────────────────────────────────────────────

async def test_verify_by_authorized_verifier(client, record_body, verifier):
    record_id = await _add(client, record_body)

    res = await client.post(
        f"/api/v1/records/{record_id}/verify", headers=as_identity(verifier),
    )

    assert res.status_code == 200
    assert res.json()["verified"] is True
    assert res.json()["verifier"] == verifier
    stored = (await client.get(f"/api/v1/records/{record_id}")).json()
    assert stored["verified"] is True
    assert stored["verifier"] == verifier
    assert stored["state"] == "verified"


async def test_second_verify_is_conflict(client, record_body, verifier):
    record_id = await _add(client, record_body)
    await client.post(f"/api/v1/records/{record_id}/verify", headers=as_identity(verifier))

    res = await client.post(
        f"/api/v1/records/{record_id}/verify", headers=as_identity(verifier),
    )

    assert res.status_code == 409
    assert res.json()["error"]["code"] == "ALREADY_VERIFIED"


async def test_verify_by_unlisted_identity_is_forbidden(client, record_body):
    record_id = await _add(client, record_body)

    res = await client.post(
        f"/api/v1/records/{record_id}/verify", headers=as_identity("mallory"),
    )

    assert res.status_code == 403
    assert res.json()["error"]["code"] == "UNAUTHORIZED"
    stored = (await client.get(f"/api/v1/records/{record_id}")).json()
    assert stored["verified"] is False
    assert stored["verifier"] is None


async def test_verify_without_identity_is_forbidden(client, record_body):
    record_id = await _add(client, record_body)

    res = await client.post(f"/api/v1/records/{record_id}/verify")

    assert res.status_code == 403


async def test_verify_unknown_record_is_not_found(client, verifier):
    res = await client.post("/api/v1/records/5/verify", headers=as_identity(verifier))

    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RECORD_NOT_FOUND"


async def test_immutable_fields_unchanged_by_verification(client, record_body, verifier):
    record_id = await _add(client, record_body)
    before = (await client.get(f"/api/v1/records/{record_id}")).json()

    await client.post(f"/api/v1/records/{record_id}/verify", headers=as_identity(verifier))
    after = (await client.get(f"/api/v1/records/{record_id}")).json()

    for field in ("id", "owner", "employer_name", "title", "description",
                  "start_date", "end_date", "created_at"):
        assert after[field] == before[field]


# ─── get_total_records ───────────────────────────────────────────

async def test_total_counts_successful_submissions_only(client, record_body):
    for _ in range(3):
        await _add(client, record_body)
    await client.post("/api/v1/records", json={}, headers=as_identity(OWNER))

    res = await client.get("/api/v1/records/total")

    assert res.status_code == 200
    assert res.json() == {"total_records": 3}
