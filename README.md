# foxtive-web

Framework-independent building blocks for web services, in plain Python
with no runtime dependencies:

- **Multipart uploads** (`foxtive_web.multipart`, `foxtive_web.validator`,
  `foxtive_web.file_input`) — parse a `multipart/form-data` body into plain
  form fields and uploaded files, check the files against per-field rules and
  save them to disk.
- **Uniform JSON responses** (`foxtive_web.responder`,
  `foxtive_web.response_code`, `foxtive_web.json_message`) — every body carries
  `data`, `success`, `message`, `code` and `timestamp`, with three-digit
  application codes (`"000"`, `"004"`, …) tied to HTTP statuses.
- **HTTP errors** (`foxtive_web.http_error`) — exceptions that know their
  status code and how to render themselves as a JSON response.
- **Request helpers** (`foxtive_web.query`, `foxtive_web.json_body`,
  `foxtive_web.client_info`) — pagination and search query parameters, small
  payload shapes, JSON request bodies and client details (IP address and user
  agent).

## What this package does not do

It does not run a server, route requests, apply middleware or handle CORS.
You hand it header values and body bytes taken from whatever framework or
server you use, and get back parsed values or `Response` objects (status,
headers, body bytes) that you pass on yourself. Multipart bodies are read
whole from memory, not streamed.

## Installation

```
pip install foxtive-web
```

## Multipart uploads

```python
from foxtive_web.multipart import Multipart
from foxtive_web.validator import FileRules, Validator
from foxtive_web.errors import MultipartError

upload = Multipart(content_type_header, request_body)

validator = Validator().add_rule(
    "avatar",
    FileRules(
        required=True,
        max_size=2 * 1024 * 1024,
        allowed_extensions=["png", "jpg"],
        allowed_content_types=["image/png", "image/jpeg"],
    ),
)

try:
    upload.validate(validator)      # parses the body, then checks the rules
except MultipartError as exc:
    print(exc)                      # e.g. "Invalid file extension for field 'avatar': .gif"

avatar = upload.first_file("avatar")
print(avatar.file_name, avatar.human_size())   # e.g. "me.png 12.40 KB"
avatar.save("uploads/me.png")

title = upload.first_data_required("title").value   # MissingDataFieldError if absent
count_field = upload.first_data("count")            # None if absent
count = count_field.get(int) if count_field else 0
```

The body is read once, by `process()` or `validate()`. Results are available
through `all_data()`, `data(field)`, `first_data(field)`, `all_files()`,
`files(field)`, `first_file(field)` and `has_file(field)`.

A missing or non-multipart `Content-Type`, a missing boundary or a broken body
raises `MalformedMultipartError`; a file part without a `Content-Type` header
raises `NoContentTypeError`. Rule failures raise `ValidationError`, whose
`field` and `error` (an `ErrorMessage` with an `ErrorKind` and a value) say
what went wrong. All of these derive from `MultipartError`.

A single file can be checked on its own with
`FileInput.validate(FileRules(...))`; `min_files` and `max_files` only matter
when a whole field is validated.

## JSON responses

```python
from foxtive_web import responder
from foxtive_web.response_code import ResponseCode

resp = responder.send_msg({"id": 1}, ResponseCode.CREATED, "Created")
resp.status          # 201
resp.json()          # {"code": "001", "success": True, "timestamp": ...,
                     #  "message": "Created", "data": {"id": 1}}

responder.not_found()                       # 404, code "008", message "Not Found"
responder.entity_not_found_message("user")  # message "Such user does not exists"
responder.redirect("/login")                # 302 with a Location header
responder.respond({"raw": True}, 200)       # no envelope
```

`ResponseCode.from_code("004")` and `ResponseCode.from_status(400)` look codes
up in either direction and raise `ValueError` for unknown values.

## Errors

```python
from foxtive_web.http_error import make_http_error_response, PayloadError

resp = make_http_error_response(PayloadError("payload too large"))
resp.status   # 400
```

A plain `HttpError` answers 500 and hides its details. `PayloadError` answers
400. `MultipartUploadError` wraps a `MultipartError`: its `status_code()` is
415 for invalid extensions or content types and 400 otherwise, while its
`error_response()` is always a 400 "File Upload Error" response carrying the
error text.

## Request helpers

```python
from foxtive_web.query import QueryParams, date_from_unsafe_input
from foxtive_web.json_body import JsonBody
from foxtive_web.client_info import ClientInfo

params = QueryParams.from_mapping({"page": "2", "per_page": "500", "search": "cat"})
params.curr_page()          # 2
params.page_size()          # 150 (default 10, capped at 150)
params.page_limit()         # 10
params.search_query_like()  # "%cat%"

date_from_unsafe_input("2024-01-31", "start_date")   # datetime at midnight;
                                                     # InvalidDateError if malformed

body = JsonBody.from_bytes(b'{"name": "x"}')          # Utf8Error if not UTF-8
body.json_value()           # {"name": "x"}
body.deserialize(lambda d: d["name"])                 # "x"; JsonBodyError (400) on failure

info = ClientInfo.from_request({"User-Agent": "curl/8"}, "10.0.0.1:5000")
ip, ua = info.into_parts()  # ("10.0.0.1:5000", "curl/8")
```

`ClientInfo.from_request` prefers the `Forwarded` header's `for=` value, then
the first `X-Forwarded-For` address, then the peer address.

## Running the tests

```
pip install -e ".[test]"
pytest
```