import pytest

import frontend.web as webmod
from frontend.web import app as flask_app
from fuzzmatch import Matcher


@pytest.fixture()
def client():
    webmod._candidates = ["foo_bar_baz", "foobarbaz", "Hello World", "café"]
    webmod._matcher = Matcher()
    yield flask_app.test_client()
    webmod._candidates = []


@pytest.mark.e2e
def test_match_endpoint(client):
    rv = client.get("/api/match?text=foo_bar_baz&q=fbb")
    assert rv.status_code == 200
    assert rv.get_json() == {"start": 0, "end": 9, "score": 70, "positions": [0, 4, 8]}


@pytest.mark.e2e
def test_match_endpoint_flags(client):
    rv = client.get("/api/match?text=Hello%20World&q=hw&case_sensitive=1")
    assert rv.get_json() == {"start": -1, "end": -1, "score": -1, "positions": []}
    rv = client.get("/api/score?text=caf%C3%A9&q=cafe&normalize=false")
    assert rv.get_json() == {"score": -1}
    rv = client.get("/api/score?text=caf%C3%A9&q=cafe")
    assert rv.get_json() == {"score": 104}


@pytest.mark.e2e
def test_rank_over_loaded_candidates(client):
    rv = client.get("/api/rank?q=fbb&k=5")
    assert rv.status_code == 200
    data = rv.get_json()
    assert [r["text"] for r in data] == ["foo_bar_baz", "foobarbaz"]
    for key in ("text", "score", "start", "end", "positions", "index"):
        assert key in data[0]
    assert client.get("/api/rank?q=").get_json() == []


@pytest.mark.e2e
def test_rank_post_with_inline_candidates(client):
    rv = client.post("/api/rank", json={"pattern": "ab", "candidates": ["xab", "ab", "zz"], "k": 5})
    assert rv.status_code == 200
    assert [r["text"] for r in rv.get_json()] == ["ab", "xab"]


@pytest.mark.e2e
@pytest.mark.parametrize("body", [
    ["not", "an", "object"],
    {"pattern": "a", "candidates": "abc"},
    {"pattern": "a", "candidates": ["abc"], "k": -1},
    {"pattern": "a", "candidates": ["abc", 3]},
    {"pattern": 5, "candidates": ["abc"]},
    {"pattern": 0, "candidates": ["abc"]},
    {"pattern": [], "candidates": ["abc"]},
    {"pattern": "a", "candidates": ["abc"], "k": True},
    {"pattern": "a", "candidates": ["abc"], "case_sensitive": "false"},
    {"pattern": "a", "candidates": ["abc"], "normalize": 1},
])
def test_rank_post_rejects_bad_input(client, body):
    rv = client.post("/api/rank", json=body)
    assert rv.status_code == 400
    assert "error" in rv.get_json()


@pytest.mark.e2e
def test_rank_get_rejects_negative_k(client):
    rv = client.get("/api/rank?q=fbb&k=-1")
    assert rv.status_code == 400
    assert "error" in rv.get_json()


@pytest.mark.e2e
def test_rank_post_accepts_boolean_flags(client):
    rv = client.post("/api/rank", json={"pattern": "HW", "candidates": ["Hello World", "hello world"],
                                        "case_sensitive": True, "normalize": False})
    assert rv.status_code == 200
    assert [r["text"] for r in rv.get_json()] == ["Hello World"]
