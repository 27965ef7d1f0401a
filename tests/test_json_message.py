from foxtive_web.json_message import JsonResponse, make_json_message


def test_ok():
    data = {"key": "value"}
    message = "Operation successful"

    response = make_json_message(data, "000", True, message)

    assert response.success
    assert response.code == "000"
    assert response.timestamp > 0
    assert response.data == data
    assert response.message == message


def test_failure():
    data = {"error": "something went wrong"}
    message = "Operation failed"

    response = make_json_message(data, "010", False, message)

    assert not response.success
    assert response.code == "010"
    assert response.timestamp > 0
    assert response.data == data
    assert response.message == message


def test_message_defaults_to_none():
    response = make_json_message([1, 2], "000", True)
    assert response.message is None


def test_to_dict_holds_all_fields():
    response = JsonResponse(data={"a": 1}, success=True, message="m", code="000", timestamp=5)
    assert response.to_dict() == {
        "code": "000",
        "success": True,
        "timestamp": 5,
        "message": "m",
        "data": {"a": 1},
    }