import hashlib

from fastapi.testclient import TestClient

from treehash.api import app

client = TestClient(app)


def _h(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_upload_tree_hash():
    response = client.post(
        "/tree-hash",
        files={"file": ("lines.txt", b"a\r\nb\r\n", "text/plain")},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["source_path"] == "lines.txt"
    assert body["tree_hash"] == _h(_h(b"a") + _h(b"b")).hex()
    assert body["leaf_count"] == 2
    assert "leaves" not in body


def test_upload_empty_file_with_leaves():
    response = client.post(
        "/tree-hash",
        params={"include_leaves": "true"},
        files={"file": ("empty.txt", b"", "text/plain")},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["tree_hash"] == _h(b"").hex()
    assert body["leaves"] == [_h(b"").hex()]


def test_upload_unknown_algorithm():
    response = client.post(
        "/tree-hash",
        params={"algorithm": "nope"},
        files={"file": ("a.txt", b"a\n", "text/plain")},
    )
    assert response.status_code == 400
    assert response.json()["detail"]["error_type"] == "HashAlgorithmUnavailable"


def test_upload_decode_error():
    response = client.post(
        "/tree-hash",
        params={"encoding": "utf-8"},
        files={"file": ("bad.txt", b"\xff\n", "text/plain")},
    )
    assert response.status_code == 422
    assert response.json()["detail"]["line_number"] == 1
