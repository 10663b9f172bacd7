from .store_settings import DB_PATH_ENV, SUITE_ENV, StoreSettings, load_store_settings

__all__ = ["StoreSettings", "load_store_settings", "DB_PATH_ENV", "SUITE_ENV"]
