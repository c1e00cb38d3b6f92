import sys

from capstone_catalog.shared.proc import popen


def run(host: str = "0.0.0.0", port: int = 8000):
    api_cmd = [
        sys.executable,
        "-m", "uvicorn",
        "capstone_catalog.backend.app.main:app",
        "--host", host,
        "--port", str(port),
    ]

    print(f"Starting API on http://localhost:{port}")
    return popen(api_cmd)
