import pytest

from email_classifier.errors import UnsupportedFileTypeError
from email_classifier.models import EmailFile, SubmissionInput
from email_classifier.validation import (
    EMPTY_SUBMISSION_MESSAGE, check_email_file, is_supported_file, validate_submission,
)


@pytest.mark.parametrize("text", [None, "", "   ", "\n\t "])
def test_blank_text_without_file_is_rejected(text):
    result = validate_submission(SubmissionInput(text=text))

    assert result.valid is False
    assert result.errors == {"email_text": EMPTY_SUBMISSION_MESSAGE}


def test_text_is_enough():
    assert validate_submission(SubmissionInput(text="  Hello ")).valid


def test_file_is_enough_even_with_blank_text():
    file = EmailFile(name="mail.txt", content=b"hi", mime_type="text/plain")
    assert validate_submission(SubmissionInput(text="  ", file=file)).valid


def test_validate_is_repeatable():
    submission = SubmissionInput(text="")
    assert validate_submission(submission) == validate_submission(submission)


def test_submission_kind():
    file = EmailFile(name="mail.pdf", content=b"%PDF")
    assert SubmissionInput().kind == "empty"
    assert SubmissionInput(text="x").kind == "text"
    assert SubmissionInput(file=file).kind == "file"
    assert SubmissionInput(text="x", file=file).kind == "both"


@pytest.mark.parametrize("name, mime", [
    ("mail.txt", None),
    ("MAIL.PDF", None),
    ("mail", "text/plain"),
    ("scan.bin", "application/pdf"),
])
def test_supported_files(name, mime):
    assert is_supported_file(name, mime)


@pytest.mark.parametrize("name, mime", [
    ("photo.png", "image/png"),
    ("mail.docx", None),
    ("", None),
])
def test_unsupported_files(name, mime):
    assert not is_supported_file(name, mime)


def test_check_email_file_rejects_other_types():
    with pytest.raises(UnsupportedFileTypeError) as exc:
        check_email_file("photo.png", b"\x89PNG", "image/png")
    assert exc.value.file_name == "photo.png"


def test_check_email_file_wraps_upload():
    f = check_email_file("mail.txt", b"hello", "text/plain")
    assert f == EmailFile(name="mail.txt", content=b"hello", mime_type="text/plain")
