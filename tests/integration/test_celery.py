"""Integration tests for the Celery configuration and task registry."""

import pytest

pytestmark = pytest.mark.integration

MESSAGE_PATTERNS = [
    "products.create",
    "products.find_all",
    "products.find_one",
    "products.update",
    "products.remove",
    "products.validate",
]


class TestCeleryConfig:
    """Verifies Celery loads through Django settings."""

    def test_celery_app_is_importable(self):
        from config.celery import app

        assert app.main == "catalog"

    def test_celery_app_exported_from_init(self):
        from config import celery_app

        assert celery_app.main == "catalog"

    def test_celery_broker_url_configured(self, settings):
        assert settings.CELERY_BROKER_URL is not None
        assert "redis" in settings.CELERY_BROKER_URL

    def test_celery_result_backend_configured(self, settings):
        assert settings.CELERY_RESULT_BACKEND is not None
        assert "redis" in settings.CELERY_RESULT_BACKEND

    def test_celery_serializer_is_json(self, settings):
        assert settings.CELERY_TASK_SERIALIZER == "json"
        assert settings.CELERY_RESULT_SERIALIZER == "json"
        assert settings.CELERY_ACCEPT_CONTENT == ["json"]

    def test_celery_timezone_matches_django(self, settings):
        assert settings.CELERY_TIMEZONE == settings.TIME_ZONE


class TestMessagePatternRegistry:
    @pytest.mark.parametrize("pattern", MESSAGE_PATTERNS)
    def test_pattern_is_registered(self, pattern):
        import modules.products.tasks  # noqa: F401
        from config.celery import app

        assert pattern in app.tasks

    def test_task_names_match_patterns(self):
        from modules.products import tasks

        assert tasks.find_one_product.name == "products.find_one"
        assert tasks.validate_products.name == "products.validate"


class TestWorkerStartupHook:
    def test_store_hook_connected_to_worker_process_init(self):
        from celery.signals import worker_process_init

        keys = [lookup_key for lookup_key, _ in worker_process_init.receivers]
        assert any(key[0] == "catalog.store_connect" for key in keys)
