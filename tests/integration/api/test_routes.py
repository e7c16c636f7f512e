"""End-to-end tests for the HTTP surface, against a real SQLite file."""

import pytest
from fastapi.testclient import TestClient

from datayoinker import __version__
from datayoinker.application.api.rest.app import create_app
from datayoinker.config import Config


@pytest.fixture
def client(db_config: Config):
    with TestClient(create_app(db_config)) as test_client:
        yield test_client


def _publish(client: TestClient, topic: str, **params) -> dict:
    response = client.get(f"/publish/yoink/for/{topic}", params=params)
    assert response.status_code == 200, response.text
    return response.json()


class TestPublish:
    def test_infers_value_types(self, client: TestClient):
        body = _publish(client, "benchmark", num="666.666", threads="7", result="discard")

        assert body["topic"] == "benchmark"
        assert body["content"] == {"num": 666.666, "threads": 7, "result": "discard"}
        assert isinstance(body["content"]["threads"], int)
        assert body["timestamp"].endswith("Z") or body["timestamp"].endswith("+00:00")

    def test_ids_increase_monotonically(self, client: TestClient):
        ids = [_publish(client, topic, n="1")["id"] for topic in ["a", "b", "a"]]

        assert ids[0] < ids[1] < ids[2]

    def test_latest_is_byte_identical_to_publish_response(self, client: TestClient):
        published = client.get("/publish/yoink/for/demoESP32", params={"tempreading": "25.7"})

        latest = client.get("/get/latest/yoink/from/demoESP32")

        assert latest.status_code == 200
        assert latest.content == published.content

    def test_without_parameters_stores_empty_content(self, client: TestClient):
        assert _publish(client, "quiet")["content"] == {}

    def test_multi_valued_parameter_is_rejected_and_nothing_stored(self, client: TestClient):
        response = client.get("/publish/yoink/for/sensors?a=1&a=2")

        assert response.status_code == 400
        body = response.json()
        assert set(body) == {"error", "detail", "status"}
        assert body["status"] == 400
        assert client.get("/get/all/yoinks/from/sensors").json() == []

    def test_repeated_identical_values_are_rejected(self, client: TestClient):
        response = client.get("/publish/yoink/for/sensors?a=1&a=1")

        assert response.status_code == 400

    def test_post_form_body(self, client: TestClient):
        response = client.post("/yoink/sensors?unit=C", data={"temp": "21.5"})

        assert response.status_code == 200
        assert response.json()["content"] == {"unit": "C", "temp": 21.5}

    def test_post_name_in_query_and_form_counts_as_repeated(self, client: TestClient):
        response = client.post("/yoink/sensors?temp=1", data={"temp": "2"})

        assert response.status_code == 400

    def test_post_file_upload_is_rejected(self, client: TestClient):
        response = client.post("/yoink/sensors", files={"blob": ("blob.bin", b"\x00\x01")})

        assert response.status_code == 400
        assert client.get("/yoinks/sensors").json() == []

    def test_post_json_body_is_rejected_and_nothing_stored(self, client: TestClient):
        response = client.post("/yoink/sensors", json={"temp": 21.5})

        assert response.status_code == 400
        assert response.json()["status"] == 400
        assert client.get("/yoinks/sensors").json() == []

    def test_post_without_body_uses_query_only(self, client: TestClient):
        response = client.post("/yoink/sensors?temp=21.5")

        assert response.status_code == 200
        assert response.json()["content"] == {"temp": 21.5}

    def test_post_malformed_multipart_keeps_error_shape(self, client: TestClient):
        response = client.post(
            "/yoink/sensors",
            content=b"not really multipart",
            headers={"content-type": "multipart/form-data"},
        )

        assert response.status_code == 400
        body = response.json()
        assert set(body) == {"error", "detail", "status"}
        assert body["detail"] == "Bad Request"
        assert body["status"] == 400
        assert client.get("/yoinks/sensors").json() == []


class TestRetrieve:
    def test_latest_on_unknown_topic_is_the_empty_yoink(self, client: TestClient):
        response = client.get("/get/latest/yoink/from/nobody-home")

        assert response.status_code == 200
        assert response.json() == {"id": 0, "topic": "", "timestamp": None, "content": {}}

    def test_last_and_all_on_unknown_topic_are_empty(self, client: TestClient):
        assert client.get("/get/last/3/yoinks/from/nobody-home").json() == []
        assert client.get("/get/all/yoinks/from/nobody-home").json() == []

    def test_last_three_newest_first(self, client: TestClient):
        ids = [_publish(client, "sensors", n=str(n))["id"] for n in range(5)]

        body = client.get("/get/last/3/yoinks/from/sensors").json()

        assert [y["id"] for y in body] == ids[::-1][:3]

    def test_last_more_than_stored(self, client: TestClient):
        for n in range(2):
            _publish(client, "sensors", n=str(n))

        assert len(client.get("/get/last/100/yoinks/from/sensors").json()) == 2

    @pytest.mark.parametrize(
        "path",
        [
            "/get/last/2/yoinks/from/sensors",
            "/get/2/last/yoinks/from/sensors",
            "/get/latest/2/yoinks/from/sensors",
            "/get/2/latest/yoinks/from/sensors",
            "/yoinks/sensors/2",
        ],
    )
    def test_last_n_aliases(self, client: TestClient, path: str):
        for n in range(3):
            _publish(client, "sensors", n=str(n))

        body = client.get(path).json()

        assert [y["content"]["n"] for y in body] == [2, 1]

    def test_all_newest_first(self, client: TestClient):
        for n in range(3):
            _publish(client, "sensors", n=str(n))
        _publish(client, "other", n="99")

        body = client.get("/get/all/yoinks/from/sensors").json()

        assert [y["content"]["n"] for y in body] == [2, 1, 0]
        assert client.get("/yoinks/sensors").json() == body

    def test_rest_latest(self, client: TestClient):
        published = client.post("/yoink/sensors", data={"temp": "20"})

        assert client.get("/yoink/sensors").content == published.content

    @pytest.mark.parametrize(
        "number, detail",
        [
            ("abc", "Error parsing number of yoinks"),
            ("1.5", "Error parsing number of yoinks"),
            ("0", "Error validating number of yoinks"),
            ("-4", "Error validating number of yoinks"),
        ],
    )
    def test_invalid_number_is_a_client_error(self, client: TestClient, number: str, detail: str):
        response = client.get(f"/get/last/{number}/yoinks/from/sensors")

        assert response.status_code == 400
        assert response.json()["detail"] == detail
        assert response.json()["status"] == 400


class TestPages:
    def test_landing_page(self, client: TestClient):
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "/quickstart" in response.text

    def test_quickstart_uses_request_base_url(self, client: TestClient):
        response = client.get("/quickstart")

        assert response.status_code == 200
        assert "http://testserver/publish/yoink/for/demoESP32" in response.text

    def test_info(self, client: TestClient):
        response = client.get("/info")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert f"Version: {__version__}" in response.text

    def test_unknown_route_keeps_error_shape(self, client: TestClient):
        response = client.get("/no/such/page")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found", "detail": "Not Found", "status": 404}
