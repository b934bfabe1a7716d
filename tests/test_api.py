import pytest
from fastapi.testclient import TestClient

from plagiarism_checker.api.app import app

FOX_TEXT_1 = "The quick brown fox jumps over the lazy dog."
FOX_TEXT_2 = "A quick brown fox jumps over the lazy dog."


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_check_defaults(client):
    response = client.post("/plagiarism/check", json={"text1": FOX_TEXT_1, "text2": FOX_TEXT_2})
    assert response.status_code == 200
    assert response.json() == {
        "similarity_score": 1.0,
        "algorithm": "Average Similarity",
        "is_plagiarized": True,
    }


def test_check_with_options(client):
    response = client.post(
        "/plagiarism/check",
        json={
            "text1": "The quick brown fox",
            "text2": "A quick brown dog",
            "algorithm": "jaccard",
            "threshold": 0.4,
            "custom_stop_words": ["fox"],
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["similarity_score"] == 0.4
    assert body["is_plagiarized"] is True


def test_check_rejects_unknown_algorithm(client):
    response = client.post(
        "/plagiarism/check", json={"text1": "a", "text2": "b", "algorithm": "levenshtein"}
    )
    assert response.status_code == 422
    assert "levenshtein" in response.json()["detail"]


def test_check_rejects_threshold_out_of_range(client):
    response = client.post(
        "/plagiarism/check", json={"text1": "a", "text2": "b", "threshold": 1.5}
    )
    assert response.status_code == 422


def test_check_requires_both_texts(client):
    response = client.post("/plagiarism/check", json={"text1": "a"})
    assert response.status_code == 422


def test_details(client):
    response = client.post(
        "/plagiarism/details", json={"text1": "apple banana apple", "text2": "apple cherry"}
    )
    assert response.status_code == 200
    scores = response.json()["scores"]
    assert list(scores) == [
        "Cosine Similarity",
        "Jaccard Similarity",
        "TF-IDF Similarity",
        "Average Similarity",
    ]
    assert scores["Average Similarity"] == 0.48


def test_build_config_reads_environment_defaults(monkeypatch):
    from plagiarism_checker.api import app as app_module
    from plagiarism_checker.models import Algorithm, InvalidArgumentError

    monkeypatch.setattr(app_module, "DEFAULT_ALGORITHM", "TFIDF")
    monkeypatch.setattr(app_module, "DEFAULT_STOP_WORDS", "fox, ,dog")
    config = app_module.build_config()
    assert config.algorithm is Algorithm.TFIDF
    assert config.stop_words == frozenset({"fox", "dog"})

    monkeypatch.setattr(app_module, "DEFAULT_ALGORITHM", "bogus")
    with pytest.raises(InvalidArgumentError):
        app_module.build_config()


@pytest.mark.parametrize("raw", ["1.5", "-0.2", "high"])
def test_build_config_rejects_bad_threshold(monkeypatch, raw):
    from plagiarism_checker.api import app as app_module
    from plagiarism_checker.models import InvalidArgumentError

    monkeypatch.setattr(app_module, "DEFAULT_THRESHOLD", raw)
    with pytest.raises(InvalidArgumentError) as excinfo:
        app_module.build_config()
    assert excinfo.value.field == "threshold"


def test_build_config_parses_threshold(monkeypatch):
    from plagiarism_checker.api import app as app_module

    monkeypatch.setattr(app_module, "DEFAULT_THRESHOLD", "0.55")
    assert app_module.build_config().threshold == 0.55
