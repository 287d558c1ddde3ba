import sys

from pan_validation.config.settings import Settings
from pan_validation.database.connection import close_pool, init_pool
from pan_validation.database.repositories.pan_repository import PanRepository
from pan_validation.logging.logger import Log
from pan_validation.processor.processor import build_processor


def main() -> int:
    """Entry point: load settings -> open pool if needed -> run pipeline once."""
    settings = Settings()
    Log.configure(settings.log_level)
    Log.info(f"Starting PAN validation (env={settings.app_env})")

    try:
        if settings.uses_database:
            init_pool(settings)
            PanRepository().ensure_tables()
        processor = build_processor(settings)
        processor.process()
    except Exception:
        Log.exception("PAN validation failed")
        return 1
    finally:
        close_pool()
    return 0


if __name__ == "__main__":
    sys.exit(main())
