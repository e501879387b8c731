"""
Integration tests for the index route.
"""
import pytest


@pytest.mark.integration
def test_index_returns_every_collection(client):
    client.post("/projetos", json={"titulo": "X"})
    client.put("/basicos", json={"nome": "Ana"})

    response = client.get("/")

    assert response.status_code == 200
    assert response.get_json() == {
        "dadosBasicos": {"nome": "Ana"},
        "cursos": [],
        "projetos": [{"id": 1, "titulo": "X"}],
        "competencias": [],
        "redesSociais": {},
    }


@pytest.mark.integration
def test_startup_survives_malformed_file(temp_data_dir):
    from portfolio import create_app
    from portfolio.config import Config

    (temp_data_dir / "cursos.json").write_text("{oops", encoding="utf-8")
    test_config = type("TestConfig", (Config,), {"DATA_DIR": temp_data_dir, "TESTING": True})

    client = create_app(test_config).test_client()

    assert client.get("/cursos").get_json() == []
    assert (temp_data_dir / "cursos.json").read_text(encoding="utf-8") == "{oops"


@pytest.mark.integration
def test_cors_headers(client):
    response = client.get("/cursos", headers={"Origin": "http://example.com"})

    assert response.headers.get("Access-Control-Allow-Origin") in ("*", "http://example.com")
