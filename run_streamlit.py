"""
Launcher script for the YouTube Transcript Summarizer Streamlit app.
"""

import os
import argparse
import subprocess
import sys
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.absolute()
STREAMLIT_SCRIPT = PROJECT_ROOT / "app" / "frontend" / "streamlit_app.py"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="YouTube Transcript Summarizer Streamlit App")
    parser.add_argument("--port", type=int, default=8501, help="Port to run Streamlit on")
    parser.add_argument("--api-url", default=None,
                        help="URL of the API server (default: PUBLIC_URL or http://localhost:8000)")
    return parser.parse_args(argv)


def streamlit_command(port: int) -> List[str]:
    return [
        "streamlit", "run", str(STREAMLIT_SCRIPT),
        "--server.port", str(port),
        "--server.headless", "true",
        "--browser.gatherUsageStats", "false",
    ]


def streamlit_env(api_url: str, base_env: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Environment for the Streamlit process: the API URL and an importable ``app`` package."""
    env = dict(os.environ if base_env is None else base_env)
    # app.config picks this up as the default API URL
    env["PUBLIC_URL"] = api_url
    env["PYTHONPATH"] = os.pathsep.join(p for p in (str(PROJECT_ROOT), env.get("PYTHONPATH")) if p)
    return env


def main(argv: Optional[List[str]] = None):
    """Launch the Streamlit app with command line options."""
    load_dotenv()
    args = parse_args(argv)
    api_url = args.api_url or os.getenv("PUBLIC_URL", "http://localhost:8000")

    print(f"Starting Streamlit UI on port {args.port}, talking to {api_url}")
    try:
        subprocess.run(streamlit_command(args.port), env=streamlit_env(api_url), check=True)
    except KeyboardInterrupt:
        print("Streamlit app stopped")
    except (OSError, subprocess.CalledProcessError) as e:
        print(f"Error running Streamlit app: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
