import sys
from pathlib import Path

from capstone_catalog.shared.proc import popen


def run(port: int = 8501):
    app_path = Path(__file__).resolve().parent / "main.py"
    if not app_path.exists():
        raise FileNotFoundError(f"No main.py found in {app_path}")

    ui_cmd = [
        sys.executable,
        "-m", "streamlit",
        "run",
        str(app_path),
        "--server.port", str(port),
    ]

    print(f"Starting UI on http://localhost:{port}")
    return popen(ui_cmd)
