import json

import pytest
from conftest import SECRET

from ltregistrator_api.app.core.security import _b64_url_encode, _sign, create_access_token, decode_access_token


def test_token_carries_claims():
    token = create_access_token({"sub": "7", "role": "Manager"}, secret_key="k")

    payload = decode_access_token(token, "k")

    assert payload["sub"] == "7"
    assert payload["role"] == "Manager"
    assert "exp" in payload


def test_expired_token_is_rejected():
    token = create_access_token({"sub": "7"}, expires_delta=-5, secret_key="k")

    assert decode_access_token(token, "k") is None


def test_tampered_payload_is_rejected():
    header, _, signature = create_access_token({"sub": "7"}, secret_key="k").split(".")
    _, forged_payload, _ = create_access_token({"sub": "1"}, secret_key="k").split(".")

    assert decode_access_token(f"{header}.{forged_payload}.{signature}", "k") is None


def test_garbage_is_rejected():
    assert decode_access_token("not-a-token", "k") is None
    assert decode_access_token("a.b.c", "k") is None


def _signed(payload, secret="k"):
    header_b64 = _b64_url_encode(json.dumps({"alg": "HS256", "typ": "JWT"}).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(payload).encode("utf-8"))
    signature = _sign(f"{header_b64}.{payload_b64}".encode("utf-8"), secret)
    return f"{header_b64}.{payload_b64}.{_b64_url_encode(signature)}"


@pytest.mark.parametrize("exp", ["soon", [1], {"at": 1}])
def test_signed_token_with_malformed_exp_is_rejected(exp):
    assert decode_access_token(_signed({"sub": "7", "exp": exp}), "k") is None


def test_signed_token_without_object_payload_is_rejected():
    assert decode_access_token(_signed(["sub", "7"]), "k") is None


def test_api_answers_malformed_exp_with_401(client):
    r = client.get("/api/project/", headers={"Authorization": f"Bearer {_signed({'sub': '1', 'exp': 'soon'}, SECRET)}"})

    assert r.status_code == 401
