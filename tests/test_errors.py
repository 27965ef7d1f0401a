import pytest

from foxtive_web.errors import (
    ErrorKind,
    ErrorMessage,
    InputError,
    InvalidContentDispositionError,
    MalformedMultipartError,
    MissingDataFieldError,
    MultipartError,
    NoContentTypeError,
    NoFileError,
    ValidationError,
    format_size,
)


@pytest.mark.parametrize(
    ("size", "expected"),
    [
        (1048576, "1.00 MB"),
        (1572864, "1.50 MB"),
        (102400, "100.00 KB"),
        (1014, "1014 bytes"),
    ],
)
def test_format_size(size, expected):
    assert format_size(size) == expected


def test_format_size_units_follow_thresholds():
    assert format_size(1023).endswith(" bytes")
    assert format_size(1024).endswith(" KB")
    assert format_size(1024 * 1024).endswith(" MB")
    assert format_size(1024 * 1024 * 1024).endswith(" GB")


@pytest.mark.parametrize(
    ("factory", "expected"),
    [
        (lambda: NoFileError(), "No file was uploaded"),
        (lambda: NoContentTypeError("x"), "Invalid content type: x"),
        (lambda: MissingDataFieldError("title"), "Data field 'title' is required"),
        (lambda: InvalidContentDispositionError("x"), "Invalid content disposition: x"),
        (lambda: MalformedMultipartError("x"), "x"),
        (
            lambda: ValidationError(InputError("f", ErrorMessage(ErrorKind.NO_FILES))),
            "No files were uploaded for field: 'f'",
        ),
    ],
)
def test_all_errors_are_multipart_errors(factory, expected):
    err = factory()
    assert isinstance(err, MultipartError)
    assert str(err) == expected


def test_simple_messages():
    assert str(NoFileError()) == "No file was uploaded"
    assert str(MissingDataFieldError("title")) == "Data field 'title' is required"
    assert str(MalformedMultipartError("broken body")) == "broken body"
    assert str(NoContentTypeError("Empty content type")).startswith("Invalid content type: ")
    assert str(InvalidContentDispositionError("bad")).endswith(": bad")


def test_validation_no_files_uses_spaced_field_name():
    err = ValidationError(InputError("file_field", ErrorMessage(ErrorKind.NO_FILES)))
    assert str(err) == "No files were uploaded for field: 'file field'"
    assert err.field == "file_field"
    assert err.error == ErrorMessage(ErrorKind.NO_FILES)


def test_validation_size_messages_use_format_size():
    small = ValidationError(InputError("f", ErrorMessage(ErrorKind.FILE_TOO_SMALL, 1048576)))
    large = ValidationError(InputError("f", ErrorMessage(ErrorKind.FILE_TOO_LARGE, 102400)))
    assert str(small).startswith("File size is too small for field 'f'")
    assert str(small).endswith("1.00 MB")
    assert str(large).startswith("File size is too big for field 'f'")
    assert str(large).endswith("100.00 KB")


def test_validation_count_messages():
    few = ValidationError(InputError("f", ErrorMessage(ErrorKind.TOO_FEW_FILES, 1)))
    many = ValidationError(InputError("f", ErrorMessage(ErrorKind.TOO_MANY_FILES, 2)))
    assert str(few).startswith("Too few files uploaded for field 'f'")
    assert str(few).endswith("1")
    assert str(many).startswith("Too many files uploaded for field 'f'")
    assert str(many).endswith("2")


def test_validation_extension_messages():
    with_ext = ValidationError(
        InputError("image", ErrorMessage(ErrorKind.INVALID_FILE_EXTENSION, "mp4"))
    )
    without_ext = ValidationError(
        InputError("image", ErrorMessage(ErrorKind.INVALID_FILE_EXTENSION, None))
    )
    assert str(with_ext) == "Invalid file extension for field 'image': .mp4"
    assert str(without_ext).endswith("': .")
    missing = ValidationError(
        InputError("image", ErrorMessage(ErrorKind.MISSING_FILE_EXTENSION, "photo"))
    )
    assert str(missing).startswith("Invalid file, file extension is required")
    assert str(missing).endswith("photo")


def test_validation_content_type_message():
    err = ValidationError(
        InputError("f", ErrorMessage(ErrorKind.INVALID_CONTENT_TYPE, "not allowed"))
    )
    assert str(err).startswith("Invalid mime type: ")
    assert str(err).endswith("not allowed")


def test_error_message_equality():
    assert ErrorMessage(ErrorKind.FILE_TOO_SMALL, 1024) == ErrorMessage(
        ErrorKind.FILE_TOO_SMALL, 1024
    )
    assert ErrorMessage(ErrorKind.TOO_FEW_FILES, 1) != ErrorMessage(ErrorKind.TOO_MANY_FILES, 1)


def test_validation_error_keeps_its_input_error():
    err = ValidationError(InputError("f", ErrorMessage(ErrorKind.TOO_MANY_FILES, 3)))
    assert err.input_error.error == ErrorMessage(ErrorKind.TOO_MANY_FILES, 3)
    assert err.input_error.error.kind is ErrorKind.TOO_MANY_FILES
    assert str(err) == "Too many files uploaded for field 'f'. Maximum is 3"