import json

import httpx
import pytest
from pydantic import BaseModel

from httpapitest import JSONStatusResponse, respond_json
from httpapitest.models.responses import status_message


class Displayable:
    def __str__(self) -> str:
        return "displayed"


class Payload(BaseModel):
    name: str


class TestRespondJson:
    def test_default_body(self) -> None:
        response = respond_json(404)

        assert response.status_code == 404
        assert response.headers["Content-Type"] == "application/json; charset=utf-8"
        assert response.json() == {"message": "Not Found", "code": 404}

    def test_zero_status_means_ok(self) -> None:
        response = respond_json(0)

        assert response.status_code == 200
        assert response.json() == {"message": "OK", "code": 200}

    @pytest.mark.parametrize(
        "value",
        ["displayed", ValueError("displayed"), Displayable()],
        ids=["string", "exception", "displayable"],
    )
    def test_message_values(self, value: object) -> None:
        response = respond_json(400, value)

        assert response.json() == {"message": "displayed", "code": 400}

    def test_structured_value_is_sent_as_is(self) -> None:
        response = respond_json(200, Payload(name="<a&b>"))

        assert response.content == b'{"name":"<a&b>"}\n'

    def test_body_ends_with_newline(self) -> None:
        response = respond_json(201, {"id": 1})

        assert response.content.endswith(b"\n")
        assert json.loads(response.content) == {"id": 1}

    def test_usable_as_mock_handler(self) -> None:
        transport = httpx.MockTransport(lambda request: respond_json(418, "teapot"))

        with httpx.Client(transport=transport) as client:
            response = client.get("https://test_url")

        assert response.status_code == 418
        assert response.json() == {"message": "teapot", "code": 418}


class TestStatusMessage:
    @pytest.mark.parametrize(
        "value",
        [{"a": 1}, [1], 3, 1.5, True, b"raw", Payload(name="x"), None],
    )
    def test_values_without_message(self, value: object) -> None:
        assert status_message(value) is None


class TestJSONStatusResponse:
    def test_empty_fields_are_omitted(self) -> None:
        assert JSONStatusResponse().to_json() == b"{}"
        assert JSONStatusResponse(message="m").to_json() == b'{"message":"m"}'
