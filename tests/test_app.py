import pytest
from fastapi.testclient import TestClient
from app.main import app

@pytest.fixture(scope="module")
def client():
    return TestClient(app)

def test_operators(client):
    r = client.get("/operators")
    assert r.status_code == 200
    symbols = [o["symbol"] for o in r.json()["operators"]]
    assert set(symbols) == {"=", "+", "-", "*", "/", "~"}

def test_parse_ok(client):
    r = client.post("/parse", json={"expr": "a=b+c"})
    assert r.status_code == 200
    body = r.json()
    assert body["postfix"] == "abc+="
    assert body["variables"] == ["a", "b", "c"]
    assert body["operators"] == {"+": 1, "=": 1}
    assert body["depth"] == 3

@pytest.mark.parametrize("expr, fragment", [
    ("(a+b", "expected ')'"),
    ("a+", "unexpected end of input"),
    ("ab", "expected end of input"),
])
def test_parse_error(client, expr, fragment):
    r = client.post("/parse", json={"expr": expr})
    assert r.status_code == 400
    assert fragment in r.json()["detail"]

def test_parse_too_long(client):
    r = client.post("/parse", json={"expr": "a+" * 1000 + "a"})
    assert r.status_code == 400

def test_check(client):
    r = client.post("/check", json={"expr": "(a+b)*c"})
    assert r.json() == {"ok": True, "postfix": "ab+c*", "reference": "ab+c*"}

def test_check_deep_unary_chain(client):
    # exactly max_source_length characters
    r = client.post("/check", json={"expr": "~" * 511 + "a"})
    assert r.status_code == 200
    assert set(r.json()) == {"ok", "postfix", "reference"}
