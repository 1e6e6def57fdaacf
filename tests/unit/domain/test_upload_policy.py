"""Unit tests for the upload policy value object."""

import pytest

from app.domain.errors import FileTooLargeError, UnsupportedMediaError
from app.domain.value_objects.upload_policy import (
    DEFAULT_MAX_UPLOAD_BYTES,
    UploadPolicy,
    media_type_for,
)


@pytest.fixture
def policy():
    """Create a policy with the default limits."""
    return UploadPolicy()


@pytest.mark.parametrize(
    "filename,media_type",
    [
        ("transcript.pdf", "application/pdf"),
        ("passport.JPG", "image/jpeg"),
        ("passport.jpeg", "image/jpg"),
        ("ielts.png", "IMAGE/PNG"),
        ("scan.pdf", "application/pdf; charset=binary"),
    ],
)
def test_check_type_accepts_allowed_files(policy, filename, media_type):
    """Test that PDF, JPG and PNG files pass the type check."""
    policy.check_type(filename, media_type)


def test_check_type_rejects_disallowed_extension(policy):
    """Test that an executable is rejected even with an allowed media type."""
    with pytest.raises(UnsupportedMediaError) as exc_info:
        policy.check_type("setup.exe", "application/pdf")

    assert exc_info.value.filename == "setup.exe"
    assert "setup.exe" in exc_info.value.message


def test_check_type_rejects_disallowed_media_type(policy):
    """Test that a text part is rejected even with a .pdf name."""
    with pytest.raises(UnsupportedMediaError) as exc_info:
        policy.check_type("notes.pdf", "text/plain")

    assert "text/plain" in exc_info.value.message


def test_check_type_rejects_missing_extension(policy):
    """Test that a file name without extension is rejected."""
    with pytest.raises(UnsupportedMediaError):
        policy.check_type("transcript", "application/pdf")


def test_check_size_allows_exact_limit():
    """Test that a file of exactly the limit is accepted."""
    UploadPolicy(max_bytes=100).check_size("a.pdf", 100)


def test_check_size_rejects_over_limit():
    """Test that one byte over the limit is rejected."""
    with pytest.raises(FileTooLargeError) as exc_info:
        UploadPolicy(max_bytes=100).check_size("a.pdf", 101)

    assert exc_info.value.max_bytes == 100


def test_default_limit_is_ten_mebibytes(policy):
    """Test the default size limit."""
    assert policy.max_bytes == DEFAULT_MAX_UPLOAD_BYTES == 10 * 1024 * 1024


def test_non_positive_limit_is_invalid():
    """Test that a zero limit cannot be configured."""
    with pytest.raises(ValueError):
        UploadPolicy(max_bytes=0)


@pytest.mark.parametrize(
    "filename,expected",
    [
        ("a.pdf", "application/pdf"),
        ("a.JPEG", "image/jpeg"),
        ("a.jpg", "image/jpeg"),
        ("a.png", "image/png"),
        ("a.docx", "application/octet-stream"),
        ("noext", "application/octet-stream"),
    ],
)
def test_media_type_for(filename, expected):
    """Test content type guessing from the stored file name."""
    assert media_type_for(filename) == expected
