from django.apps import AppConfig


class ProductsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "modules.products"
    label = "products"

    def ready(self) -> None:
        from celery.signals import worker_process_init

        from modules.core.lifecycle import establish_store_connection

        # Each worker process opens its store connection once at startup.
        worker_process_init.connect(
            establish_store_connection, weak=False, dispatch_uid="catalog.store_connect"
        )
