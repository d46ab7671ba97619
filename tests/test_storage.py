"""
Unit tests for local upload storage.
"""

import asyncio
import io
import re

import pytest
from starlette.datastructures import Headers, UploadFile

from app.core.storage import LocalStorage, InvalidFileTypeError, FileTooLargeError


def make_upload(content: bytes, filename: str, content_type: str) -> UploadFile:
    return UploadFile(
        file=io.BytesIO(content),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


@pytest.fixture
def local_storage(tmp_path):
    return LocalStorage(base_dir=str(tmp_path), max_size=1024)


class TestFilenames:

    def test_generated_name_keeps_extension(self, local_storage):
        name = local_storage.generate_filename("My Resume.PDF")

        assert re.fullmatch(r"\d{13}-\d+\.pdf", name)

    def test_generated_name_without_extension(self, local_storage):
        assert re.fullmatch(r"\d{13}-\d+", local_storage.generate_filename("README"))

    def test_generated_names_are_unique(self, local_storage):
        names = {local_storage.generate_filename("a.png") for _ in range(50)}
        assert len(names) == 50

    @pytest.mark.parametrize("bad", ["", ".", "..", "../etc/passwd", "nested/file.pdf"])
    def test_path_for_rejects_escapes(self, local_storage, bad):
        with pytest.raises(ValueError):
            local_storage.path_for(bad)

        assert local_storage.file_exists(bad) is False


class TestSaveUpload:

    def test_saves_allowed_type(self, local_storage, tmp_path):
        upload = make_upload(b"%PDF-1.4 test", "offer.pdf", "application/pdf")

        filename = asyncio.run(local_storage.save_upload(upload))

        assert (tmp_path / filename).read_bytes() == b"%PDF-1.4 test"
        assert local_storage.file_exists(filename)

    def test_content_type_parameters_ignored(self, local_storage):
        upload = make_upload(b"\x89PNG", "pic.png", "image/png; charset=binary")

        assert asyncio.run(local_storage.save_upload(upload)).endswith(".png")

    def test_rejects_disallowed_type(self, local_storage, tmp_path):
        upload = make_upload(b"<html>", "page.html", "text/html")

        with pytest.raises(InvalidFileTypeError):
            asyncio.run(local_storage.save_upload(upload))
        assert list(tmp_path.iterdir()) == []

    def test_rejects_oversized_file_and_removes_partial(self, local_storage, tmp_path):
        upload = make_upload(b"0" * 2048, "big.pdf", "application/pdf")

        with pytest.raises(FileTooLargeError):
            asyncio.run(local_storage.save_upload(upload))
        assert list(tmp_path.iterdir()) == []

    def test_file_at_exact_limit_is_accepted(self, local_storage):
        upload = make_upload(b"0" * 1024, "edge.pdf", "application/pdf")

        assert asyncio.run(local_storage.save_upload(upload))


class TestDelete:

    def test_delete_files_is_best_effort(self, local_storage, tmp_path):
        (tmp_path / "keep-me-not.pdf").write_bytes(b"x")

        local_storage.delete_files(["keep-me-not.pdf", "never-existed.pdf", "../outside.pdf"])

        assert list(tmp_path.iterdir()) == []

    def test_delete_missing_returns_false(self, local_storage):
        assert local_storage.delete_file("missing.pdf") is False


def test_content_type_by_extension(local_storage):
    assert local_storage.content_type("a.pdf") == "application/pdf"
    assert local_storage.content_type("a.png") == "image/png"
    assert local_storage.content_type("a.jpg") == "image/jpeg"
    assert local_storage.content_type("noext") == "application/octet-stream"
