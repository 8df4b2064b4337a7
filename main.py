"""Luma Wisp dev launcher. Starts the backend with uvicorn."""

import argparse
import logging
import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = os.getenv("PORT", "5000")


def main():
    parser = argparse.ArgumentParser(description="Luma Wisp dev launcher")
    parser.add_argument("--reload", action="store_true",
                        help="Restart the server when source files change")
    parser.add_argument("--log-level", default="info",
                        help="Logging level (default: info)")
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    print(f"Starting Luma Wisp on http://localhost:{PORT} ...")
    uvicorn.run(
        "backend.app:app",
        host=HOST,
        port=int(PORT),
        reload=args.reload,
        log_level=args.log_level.lower(),
    )


if __name__ == "__main__":
    main()
