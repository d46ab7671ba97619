"""
Tests for document listing and download endpoints.
"""

import os

import pytest

PDF_BYTES = b"%PDF-1.4\nFake PDF content for testing"


def create_employee(client, employee_form, files):
    response = client.post("/save-employee", data=employee_form, files=files)
    assert response.status_code == 201
    return client.get(f"/employees/{response.json()['employeeId']}").json()


class TestGetDocuments:
    """Tests for POST /get-documents"""

    def test_lists_existing_documents(self, client, employee_form, profile_pic):
        files = dict(profile_pic, resume=("cv.pdf", PDF_BYTES, "application/pdf"))
        employee = create_employee(client, employee_form, files)

        response = client.post("/get-documents", json={"empEmail": employee_form["emp_email"]})

        assert response.status_code == 200
        documents = response.json()["documents"]
        assert set(documents) == {"emp_profile_pic", "resume"}
        assert documents["resume"] == {
            "url": f"http://testserver/uploads/{employee['resume']}",
            "name": "Resume",
            "filename": employee["resume"],
        }
        assert documents["emp_profile_pic"]["name"] == "Profile Picture"

    def test_skips_files_missing_on_disk(self, client, upload_dir, employee_form, profile_pic):
        files = dict(profile_pic, resume=("cv.pdf", PDF_BYTES, "application/pdf"))
        employee = create_employee(client, employee_form, files)
        os.remove(upload_dir / employee["resume"])

        response = client.post("/get-documents", json={"empEmail": employee_form["emp_email"]})

        assert response.status_code == 200
        assert list(response.json()["documents"]) == ["emp_profile_pic"]

    def test_mixed_case_email_is_found_as_entered(self, client, employee_form, profile_pic):
        employee_form["emp_email"] = "  Priya.Sharma@Example.COM "
        employee = create_employee(client, employee_form, profile_pic)
        assert employee["emp_email"] == "Priya.Sharma@Example.COM"

        response = client.post("/get-documents", json={"empEmail": "Priya.Sharma@Example.COM"})

        assert response.status_code == 200
        assert list(response.json()["documents"]) == ["emp_profile_pic"]

    def test_missing_email(self, client):
        response = client.post("/get-documents", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "Employee email is required"}

    def test_no_body(self, client):
        response = client.post("/get-documents")

        assert response.status_code == 400
        assert response.json() == {"error": "Employee email is required"}

    def test_non_json_body(self, client):
        response = client.post(
            "/get-documents",
            content="empEmail=priya.sharma@example.com",
            headers={"Content-Type": "text/plain"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Employee email is required"}

    @pytest.mark.parametrize("payload", [["priya.sharma@example.com"], {"empEmail": 42}, {"empEmail": "   "}])
    def test_unusable_email_value(self, client, payload):
        response = client.post("/get-documents", json=payload)

        assert response.status_code == 400
        assert response.json() == {"error": "Employee email is required"}

    def test_unknown_email(self, client):
        response = client.post("/get-documents", json={"empEmail": "nobody@example.com"})

        assert response.status_code == 404
        assert response.json() == {"error": "Employee not found"}


class TestDownload:
    """Tests for GET /download/{filename}"""

    def test_download_existing_file(self, client, upload_dir):
        (upload_dir / "1700000000000-42.pdf").write_bytes(PDF_BYTES)

        response = client.get("/download/1700000000000-42.pdf")

        assert response.status_code == 200
        assert response.content == PDF_BYTES
        assert response.headers["content-type"].startswith("application/pdf")
        assert response.headers["content-disposition"] == 'attachment; filename="1700000000000-42.pdf"'

    def test_download_unknown_extension_is_octet_stream(self, client, upload_dir):
        (upload_dir / "blob.unknownext").write_bytes(b"\x00\x01")

        response = client.get("/download/blob.unknownext")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/octet-stream")

    def test_download_missing_file(self, client):
        response = client.get("/download/does-not-exist.pdf")

        assert response.status_code == 404
        assert response.json() == {"error": "File not found"}

    def test_uploaded_file_round_trip(self, client, employee_form, profile_pic):
        files = dict(profile_pic, resume=("cv.pdf", PDF_BYTES, "application/pdf"))
        employee = create_employee(client, employee_form, files)

        response = client.get(f"/download/{employee['resume']}")

        assert response.status_code == 200
        assert response.content == PDF_BYTES


class TestUploadsMount:
    """Tests for the static /uploads/<filename> URLs returned as *_url"""

    def test_document_url_serves_uploaded_file(self, client, employee_form, profile_pic):
        files = dict(profile_pic, resume=("cv.pdf", PDF_BYTES, "application/pdf"))
        employee = create_employee(client, employee_form, files)

        assert employee["resume_url"] == f"http://testserver/uploads/{employee['resume']}"
        response = client.get(employee["resume_url"])

        assert response.status_code == 200
        assert response.content == PDF_BYTES
        assert response.headers["content-type"].startswith("application/pdf")

    def test_unknown_upload_is_not_found(self, client):
        response = client.get("/uploads/does-not-exist.pdf")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}
