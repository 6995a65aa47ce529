import uvicorn

from car_store.entrypoints.http.app import build_app
from car_store.infra.config import Settings


def main() -> None:
    settings = Settings.from_env()
    uvicorn.run(build_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
