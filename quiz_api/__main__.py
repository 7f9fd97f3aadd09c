import uvicorn

from .core.config import settings


def main() -> None:
    uvicorn.run(
        "quiz_api.main:create_app",
        factory=True,
        host=settings.BACKEND_HOST,
        port=settings.BACKEND_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
