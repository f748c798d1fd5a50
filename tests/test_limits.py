from resume_check.core.errors import UploadTooLargeError, format_size
from resume_check.core.limits import FORM_OVERHEAD_BYTES, request_too_large

MB = 1024 * 1024


def test_size_message_uses_megabytes_for_large_caps() -> None:
    assert format_size(10 * MB) == "10 MB"
    assert format_size(MB + MB // 2) == "1.5 MB"


def test_size_message_uses_kilobytes_below_one_megabyte() -> None:
    assert format_size(512 * 1024) == "512 KB"
    assert format_size(1500) == "2 KB"
    assert format_size(10) == "1 KB"
    assert "0 MB" not in UploadTooLargeError(200 * 1024).message


def test_request_too_large_compares_declared_length() -> None:
    assert request_too_large(str(3 * MB), MB)
    assert not request_too_large(str(MB + FORM_OVERHEAD_BYTES), MB)
    assert not request_too_large(str(MB), MB)


def test_request_without_usable_length_is_left_to_the_handler() -> None:
    assert not request_too_large(None, MB)
    assert not request_too_large("", MB)
    assert not request_too_large("lots", MB)
