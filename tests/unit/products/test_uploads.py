"""Unit tests for reading uploaded files into ``ProductImage``."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from django.core.files.uploadedfile import SimpleUploadedFile

from modules.products.exceptions import InvalidFileException
from modules.products.models import FILE_NAME_MAX_LENGTH, ProductImage
from modules.products.uploads import DEFAULT_CONTENT_TYPE, read_image

pytestmark = pytest.mark.unit

IMAGE_BYTES = b"\x01\x02\x03"


def _upload(name="File Name.png", content_type="image/jpeg", data=IMAGE_BYTES):
    upload = MagicMock()
    upload.name = name
    upload.content_type = content_type
    upload.read.return_value = data
    return upload


class TestReadImage:
    def test_no_upload_is_noop(self):
        assert read_image(None) is None

    def test_reads_name_type_and_bytes(self):
        image = read_image(_upload())

        assert image == ProductImage(
            file_name="File Name.png",
            content_type="image/jpeg",
            data=IMAGE_BYTES,
        )

    def test_accepts_django_uploaded_file(self):
        upload = SimpleUploadedFile("cat.gif", b"GIF89a", content_type="image/gif")

        image = read_image(upload)

        assert image.file_name == "cat.gif"
        assert image.content_type == "image/gif"
        assert image.data == b"GIF89a"
        assert image.size == 6

    def test_missing_content_type_falls_back(self):
        image = read_image(_upload(content_type=None))
        assert image.content_type == DEFAULT_CONTENT_TYPE

    @pytest.mark.parametrize(
        "name", ["..", "../etc/passwd", "a..b.png", "dir/file.png", "dir\\file.png", "", None]
    )
    def test_unsafe_name_rejected(self, name):
        upload = _upload(name=name)

        with pytest.raises(InvalidFileException):
            read_image(upload)

        upload.read.assert_not_called()

    def test_read_failure_is_translated(self):
        upload = _upload()
        upload.read.side_effect = OSError("disk gone")

        with pytest.raises(InvalidFileException) as excinfo:
            read_image(upload)

        assert not isinstance(excinfo.value, OSError)
        assert isinstance(excinfo.value.__cause__, OSError)

    def test_name_at_column_length_is_accepted(self):
        name = "a" * (FILE_NAME_MAX_LENGTH - 4) + ".png"
        image = read_image(_upload(name=name))
        assert image.file_name == name

    def test_name_longer_than_column_is_rejected(self):
        upload = _upload(name="a" * FILE_NAME_MAX_LENGTH + ".png")

        with pytest.raises(InvalidFileException):
            read_image(upload)

        upload.read.assert_not_called()
