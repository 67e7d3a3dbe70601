"""Name Routes Tests"""
from uuid import UUID

import pytest
from fastapi.testclient import TestClient
from starlette.requests import Request
from structlog.testing import capture_logs

from name_registry.infrastructure.config import Settings
from name_registry.presentation.api.dependencies import get_name_repository
from name_registry.presentation.main import create_app


@pytest.fixture
def app():
    return create_app(
        Settings(store_backend="memory", session_secret_key="test-secret")
    )


@pytest.fixture
def repository(app):
    return app.state.name_repository


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def failing_client(app, failing_repository):
    app.dependency_overrides[get_name_repository] = lambda: failing_repository
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


class TestListRoute:
    """一覧画面のテスト"""

    def test_empty_list(self, client):
        response = client.get("/names")

        assert response.status_code == 200
        assert "No names have been added yet." in response.text

    def test_root_shows_list(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert "<h1>Names</h1>" in response.text

    def test_newest_first(self, client, repository, older_record, newer_record):
        """正常: 登録日時の降順で表示"""
        # Arrange
        repository._records = {r.id: r for r in (older_record, newer_record)}

        # Act
        body = client.get("/names").text

        # Assert
        assert body.index("Grace Hopper") < body.index("Ada Lovelace")

    def test_store_failure_shows_empty_list_with_notice(self, failing_client):
        """異常: ストア障害時は空一覧＋エラー通知"""
        response = failing_client.get("/names")

        assert response.status_code == 200
        assert "Error loading names: store unavailable" in response.text
        assert "No names have been added yet." in response.text


class TestCreateRoute:
    """登録フォームのテスト"""

    def test_form(self, client):
        response = client.get("/names/create")

        assert response.status_code == 200
        assert 'name="full_name"' in response.text
        assert "Full Name" in response.text

    def test_create_redirects_to_list(self, client, repository):
        """正常: 登録後は一覧にリダイレクトし通知を表示"""
        # Act
        response = client.post(
            "/names/create", data={"full_name": "Ada Lovelace"}, follow_redirects=False
        )

        # Assert
        assert response.status_code == 303
        assert response.headers["location"].endswith("/names")

        page = client.get("/names").text
        assert "Name added successfully!" in page
        assert "Ada Lovelace" in page

    def test_flash_is_shown_once(self, client):
        client.post("/names/create", data={"full_name": "Ada"})

        assert "Name added successfully!" not in client.get("/names").text

    def test_new_name_at_top(self, client, repository, older_record):
        """正常: 新規登録は一覧の先頭に表示"""
        repository._records = {older_record.id: older_record}

        body = client.post("/names/create", data={"full_name": "Grace Hopper"}).text

        assert body.index("Grace Hopper") < body.index("Ada Lovelace")

    @pytest.mark.parametrize(
        "data, message",
        [
            ({"full_name": ""}, "Name is required"),
            ({}, "Name is required"),
            ({"full_name": "x" * 101}, "Name must be between 1 and 100 characters"),
        ],
    )
    def test_invalid_name_redisplays_form(self, client, repository, data, message):
        """異常: バリデーションエラーはフォームを再表示し保存しない"""
        response = client.post("/names/create", data=data)

        assert response.status_code == 400
        assert message in response.text
        assert repository._records == {}

    def test_store_failure_redisplays_form(self, failing_client):
        """異常: ストア障害はフォームを再表示"""
        response = failing_client.post("/names/create", data={"full_name": "Ada"})

        assert response.status_code == 500
        assert "Error adding name: store unavailable" in response.text
        assert 'value="Ada"' in response.text


class TestDeleteRoutes:
    """削除確認・削除実行のテスト"""

    def test_confirm_page(self, client, repository, older_record):
        repository._records = {older_record.id: older_record}

        response = client.get(f"/names/delete/{older_record.id}")

        assert response.status_code == 200
        assert "Are you sure you want to delete this name?" in response.text
        assert "Ada Lovelace" in response.text

    def test_confirm_unknown_id_is_not_found(self, client):
        response = client.get("/names/delete/unknown-id")

        assert response.status_code == 404

    def test_confirm_without_id_is_not_found(self, client):
        response = client.get("/names/delete")

        assert response.status_code == 404

    def test_confirm_store_failure_redirects_with_notice(self, failing_client):
        response = failing_client.get("/names/delete/some-id")

        assert response.status_code == 200
        assert "Error loading name: store unavailable" in response.text

    def test_delete_removes_from_list(self, client, repository, older_record, newer_record):
        """正常: 削除したレコードは一覧から消える"""
        # Arrange
        repository._records = {r.id: r for r in (older_record, newer_record)}

        # Act
        response = client.post(
            f"/names/delete/{older_record.id}", follow_redirects=False
        )

        # Assert
        assert response.status_code == 303
        page = client.get("/names").text
        assert "Name deleted successfully!" in page
        assert "Ada Lovelace" not in page
        assert "Grace Hopper" in page

    def test_delete_unknown_id_is_noop(self, client):
        """正常: 未知 ID の削除はエラーを表示しない"""
        response = client.post("/names/delete/unknown-id")

        assert response.status_code == 200
        assert "Name deleted successfully!" in response.text
        assert "Error" not in response.text

    def test_delete_store_failure_shows_notice(self, failing_client):
        response = failing_client.post("/names/delete/some-id")

        assert response.status_code == 200
        assert "Error deleting name: store unavailable" in response.text


class TestHealthRoutes:
    """ヘルスチェックのテスト"""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_request_id_header(self, client):
        response = client.get("/health", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"

    def test_generated_request_id(self, client):
        """正常: ヘッダーがなければリクエストIDを採番"""
        response = client.get("/health")

        assert UUID(response.headers["X-Request-ID"]).version == 4

    def test_client_errors_are_logged_as_warning(self, client):
        """正常: 4xx は warning で記録"""
        with capture_logs() as logs:
            client.get("/names/delete/unknown-id")

        completed = [e for e in logs if e["event"] == "request_completed"]
        assert completed[0]["log_level"] == "warning"
        assert completed[0]["status_code"] == 404


class TestAppSettings:
    """create_app に渡した設定が使われることのテスト"""

    @pytest.fixture
    def dynamodb_app(self):
        return create_app(
            Settings(
                store_backend="dynamodb",
                dynamodb_table_name="CustomNames",
                aws_region="us-west-2",
                service_name="custom-registry",
                session_secret_key="test-secret",
            )
        )

    def test_repository_uses_app_settings(self, dynamodb_app):
        """正常: テーブル名・リージョンはアプリケーションの設定から"""
        # Arrange
        request = Request({"type": "http", "app": dynamodb_app})

        # Act
        repository = get_name_repository(request)

        # Assert
        assert repository.table_name == "CustomNames"
        assert repository._client.meta.region_name == "us-west-2"

    def test_ready_reports_app_settings(self, dynamodb_app):
        with TestClient(dynamodb_app) as test_client:
            response = test_client.get("/ready")

        assert response.json()["store"] == {
            "backend": "dynamodb",
            "table_name": "CustomNames",
            "region": "us-west-2",
        }

    def test_health_reports_app_settings(self, dynamodb_app):
        with TestClient(dynamodb_app) as test_client:
            response = test_client.get("/health")

        assert response.json()["service"] == "custom-registry"
