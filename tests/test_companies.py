"""
회사 API 테스트
"""
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from main import app
from utils.database import get_cursor
from utils.errors import BadRequestError, NotFoundError


@pytest.fixture
def company_row():
    return {
        "handle": "c1",
        "name": "C1",
        "description": "Desc1",
        "numEmployees": 1,
        "logoUrl": "http://c1.img",
    }


class TestCreateCompany:
    """POST /companies 테스트"""

    new_company = {
        "handle": "new",
        "name": "New",
        "logoUrl": "http://new.img",
        "description": "DescNew",
        "numEmployees": 10,
    }

    def test_create_company_ok_for_admin(self, client, admin_headers):
        with patch("routers.companies.company_repo.create_company",
                   new=AsyncMock(return_value=self.new_company)) as mock_create:
            response = client.post("/companies", json=self.new_company, headers=admin_headers)

        assert response.status_code == 201
        assert response.json() == {"company": self.new_company}
        row = mock_create.call_args[0][1]
        assert row["num_employees"] == 10
        assert row["logo_url"] == "http://new.img"

    def test_create_company_unauth_for_non_admin(self, client, user_headers):
        response = client.post("/companies", json=self.new_company, headers=user_headers)
        assert response.status_code == 401

    def test_create_company_unauth_for_anon(self, client):
        response = client.post("/companies", json=self.new_company)
        assert response.status_code == 401

    def test_create_company_missing_data(self, client, admin_headers):
        """필수 필드 누락 시 400"""
        response = client.post("/companies", json={"handle": "new", "numEmployees": 10},
                               headers=admin_headers)
        assert response.status_code == 400

    def test_create_company_invalid_data(self, client, admin_headers):
        response = client.post("/companies", json={**self.new_company, "logoUrl": "not-a-url"},
                               headers=admin_headers)
        assert response.status_code == 400

    def test_create_company_duplicate(self, client, admin_headers):
        with patch("routers.companies.company_repo.create_company",
                   new=AsyncMock(side_effect=BadRequestError("Duplicate company: new"))):
            response = client.post("/companies", json=self.new_company, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "Duplicate company: new"


class TestGetCompanies:
    """GET /companies 테스트"""

    def test_get_companies_ok_for_anon(self, client, company_row):
        with patch("routers.companies.company_repo.find_all_companies",
                   new=AsyncMock(return_value=[company_row])):
            response = client.get("/companies")

        assert response.status_code == 200
        assert response.json() == {"companies": [company_row]}

    def test_get_company_with_jobs(self, client, company_row):
        detail = {**company_row, "jobs": [{"id": 1, "title": "J1", "salary": 100, "equity": "0.100"}]}
        with patch("routers.companies.company_repo.get_company", new=AsyncMock(return_value=detail)):
            response = client.get("/companies/c1")

        assert response.status_code == 200
        body = response.json()["company"]
        assert body["handle"] == "c1"
        assert body["jobs"][0]["title"] == "J1"

    def test_get_company_not_found(self, client):
        with patch("routers.companies.company_repo.get_company",
                   new=AsyncMock(side_effect=NotFoundError("No company: nope"))):
            response = client.get("/companies/nope")

        assert response.status_code == 404
        assert response.json()["detail"] == "No company: nope"


class TestUpdateCompany:
    """PATCH /companies/{handle} 테스트"""

    def test_update_company_sends_wire_field_names(self, client, admin_headers, company_row):
        """repo에는 camelCase 필드명 그대로, 보낸 필드만 전달"""
        updated = {**company_row, "name": "C1-new", "numEmployees": 5}
        with patch("routers.companies.company_repo.update_company",
                   new=AsyncMock(return_value=updated)) as mock_update:
            response = client.patch("/companies/c1", json={"name": "C1-new", "numEmployees": 5},
                                    headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"company": updated}
        mock_update.assert_awaited_once()
        _, handle, data = mock_update.call_args[0]
        assert handle == "c1"
        assert data == {"name": "C1-new", "numEmployees": 5}

    def test_update_company_full_stack_sql(self, client, admin_headers, fake_cursor, company_row):
        """라우터 -> repo -> SET 절 생성까지 실제로 실행"""
        fake_cursor.fetchone_results = [{**company_row, "logoUrl": None}]

        response = client.patch("/companies/c1", json={"logoUrl": None, "numEmployees": 3},
                                headers=admin_headers)

        assert response.status_code == 200
        update_sql, update_args = fake_cursor.executed[0]
        assert update_sql == "UPDATE companies SET `num_employees`=%s, `logo_url`=%s WHERE handle = %s"
        assert update_args == (3, None, "c1")

    def test_update_company_empty_body(self, client, admin_headers, fake_cursor):
        """빈 payload -> 400 No data, 쿼리 실행 안 함"""
        response = client.patch("/companies/c1", json={}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "No data"
        assert fake_cursor.executed == []

    def test_update_company_handle_change(self, client, admin_headers):
        """handle 변경 시도는 400"""
        response = client.patch("/companies/c1", json={"handle": "c1-new"}, headers=admin_headers)
        assert response.status_code == 400

    def test_update_company_logo_url_stored_as_sent(self, client, admin_headers, fake_cursor, company_row):
        """logoUrl은 검증만 하고 보낸 문자열 그대로 저장 (끝에 / 추가 안 함)"""
        fake_cursor.fetchone_results = [{**company_row, "logoUrl": "http://a.com"}]

        response = client.patch("/companies/c1", json={"logoUrl": "http://a.com"}, headers=admin_headers)

        assert response.status_code == 200
        update_sql, update_args = fake_cursor.executed[0]
        assert update_sql == "UPDATE companies SET `logo_url`=%s WHERE handle = %s"
        assert update_args == ("http://a.com", "c1")

    def test_update_company_invalid_logo_url(self, client, admin_headers, fake_cursor):
        response = client.patch("/companies/c1", json={"logoUrl": "not-a-url"}, headers=admin_headers)

        assert response.status_code == 400
        assert fake_cursor.executed == []

    def test_update_company_null_name(self, client, admin_headers):
        response = client.patch("/companies/c1", json={"name": None}, headers=admin_headers)
        assert response.status_code == 400

    def test_update_company_unauth_for_anon(self, client):
        response = client.patch("/companies/c1", json={"name": "C1-new"})
        assert response.status_code == 401

    def test_update_company_not_found(self, client, admin_headers):
        with patch("routers.companies.company_repo.update_company",
                   new=AsyncMock(side_effect=NotFoundError("No company: nope"))):
            response = client.patch("/companies/nope", json={"name": "new nope"}, headers=admin_headers)

        assert response.status_code == 404


class TestDeleteCompany:
    """DELETE /companies/{handle} 테스트"""

    def test_delete_company_ok_for_admin(self, client, admin_headers, fake_cursor):
        response = client.delete("/companies/c1", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"deleted": "c1"}

    def test_delete_company_unauth_for_anon(self, client):
        response = client.delete("/companies/c1")
        assert response.status_code == 401

    def test_delete_company_not_found(self, client, admin_headers, fake_cursor):
        fake_cursor.rowcount = 0

        response = client.delete("/companies/nope", headers=admin_headers)

        assert response.status_code == 404


class TestUnexpectedError:
    """예상치 못한 예외 -> 500 + 일반 메시지"""

    def test_unexpected_error_returns_500(self):
        async def broken_cursor():
            raise RuntimeError("connection lost")
            yield  # pragma: no cover

        app.dependency_overrides[get_cursor] = broken_cursor
        try:
            client = TestClient(app, raise_server_exceptions=False)
            with patch("main.logger") as mock_logger:
                response = client.get("/companies")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal Server Error"}
        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args.kwargs["exc_info"] is True
