# main.py

from pathlib import Path
from shutil import which
from subprocess import run

from blogdash.configs import settings


def uvicorn_command(host: str = "127.0.0.1", port: int = 8000) -> list[str]:
    """Build the uvicorn command line, preferring the project's virtualenv."""
    venv_uvicorn = Path(__file__).resolve().parent / ".venv" / "bin" / "uvicorn"
    executable = str(venv_uvicorn) if venv_uvicorn.exists() else which("uvicorn") or "uvicorn"
    cmmd = [
        executable,
        "blogdash.main:app",
        "--host",
        host,
        "--port",
        str(port),
        "--log-level",
        settings.LOG_LEVEL.lower(),
        "--loop",
        "uvloop",
        "--http",
        "httptools",
    ]
    if settings.DEBUG:
        cmmd.append("--reload")
    return cmmd


def main() -> None:
    run(uvicorn_command(), check=True)


if __name__ == "__main__":
    main()
