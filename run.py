"""Launch the ReTree viewer and open it in the browser."""

import sys
import threading
import time
import webbrowser
from pathlib import Path

import requests


PORT = 8501
URL = f"http://localhost:{PORT}"


def _wait_and_open_browser(url: str = URL, attempts: int = 30) -> bool:
    """Poll *url* until the Streamlit server answers, then open the browser."""
    for _ in range(attempts):
        try:
            resp = requests.get(url, timeout=2)
            if resp.status_code == 200:
                webbrowser.open(url)
                return True
        except requests.RequestException:
            pass
        time.sleep(1)
    return False


def main() -> None:
    # Allow running from a source checkout without installing
    src_dir = Path(__file__).resolve().parent / "src"
    if src_dir.exists() and str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))

    from streamlit.web import bootstrap

    app_path = str(src_dir / "ReTree" / "app.py")

    threading.Thread(target=_wait_and_open_browser, daemon=True).start()

    bootstrap.run(
        app_path,
        is_hello=False,
        args=[],
        flag_options={
            "server.headless": True,
            "server.port": PORT,
            "browser.gatherUsageStats": False,
        },
    )


if __name__ == "__main__":
    main()
