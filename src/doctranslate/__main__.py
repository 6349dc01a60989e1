"""Run the API with uvicorn: ``python -m doctranslate``."""
import uvicorn

from doctranslate.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("doctranslate.main:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
