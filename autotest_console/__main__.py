"""Run the console with uvicorn."""
import uvicorn

from .config import settings


def main():
    uvicorn.run("autotest_console.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
