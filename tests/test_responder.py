import uuid
from http import HTTPStatus

from foxtive_web import responder
from foxtive_web.response_code import ResponseCode


def test_ok():
    data = {"key": "value"}
    response = responder.send_msg(data, ResponseCode.OK, "Success")

    assert response.status == HTTPStatus.OK
    body = response.json()
    assert body["code"] == "000"
    assert body["success"] is True
    assert body["message"] == "Success"
    assert body["data"] == data


def test_created():
    data = {"key": "value"}
    response = responder.send_msg(data, ResponseCode.CREATED, "Success")

    assert response.status == HTTPStatus.CREATED
    body = response.json()
    assert body["code"] == "001"
    assert body["success"] is True
    assert body["message"] == "Success"
    assert body["data"] == data


def test_failure():
    data = {"key": "value"}
    response = responder.send_msg(data, ResponseCode.NOT_FOUND, "Failure")

    assert response.status == HTTPStatus.NOT_FOUND
    body = response.json()
    assert body["code"] == "008"
    assert body["success"] is False
    assert body["message"] == "Failure"
    assert body["data"] == data


def test_redirect():
    url = "http://example.com"
    response = responder.redirect(url)

    assert response.status == HTTPStatus.FOUND
    assert response.headers["Location"] == url


def test_internal_server_error():
    response = responder.internal_server_error()

    assert response.status == HTTPStatus.INTERNAL_SERVER_ERROR
    body = response.json()
    assert body["code"] == "010"
    assert body["success"] is False
    assert body["message"] == "Internal Server Error"
    assert body["data"] == {}


def test_send_has_no_message():
    response = responder.send([1, 2, 3], ResponseCode.OK)
    body = response.json()
    assert body["message"] is None
    assert body["data"] == [1, 2, 3]


def test_not_found():
    response = responder.not_found()
    assert response.status == HTTPStatus.NOT_FOUND
    assert response.json()["message"] == "Not Found"


def test_entity_not_found_message():
    response = responder.entity_not_found_message("User")
    assert response.status == HTTPStatus.NOT_FOUND
    assert response.json()["message"] == "Such User does not exists"


def test_warning_message_is_bad_request():
    response = responder.warning_message("careful")
    assert response.status == HTTPStatus.BAD_REQUEST
    assert response.json()["code"] == "004"


def test_success_message_matches_ok_message():
    response = responder.success_message("done")
    assert response.status == HTTPStatus.OK
    assert response.json()["message"] == "done"
    assert response.json()["success"] is True


def test_respond_sends_unwrapped_data():
    ident = uuid.uuid4()
    response = responder.respond({"id": ident}, HTTPStatus.ACCEPTED)
    assert response.status == HTTPStatus.ACCEPTED
    assert response.json() == {"id": str(ident)}
    assert response.headers["Content-Type"] == "application/json"