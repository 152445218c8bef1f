"""Launch the fan site API with uvicorn."""
import argparse
import os

import uvicorn


def main() -> None:
    parser = argparse.ArgumentParser(description="Serve the fan site JSON API.")
    parser.add_argument("--host", default=os.environ.get("FANSITE_HOST", "127.0.0.1"))
    parser.add_argument("--port", type=int, default=int(os.environ.get("FANSITE_PORT", "8000")))
    parser.add_argument("--dev", action="store_true", help="Enable the English-mode text auditor.")
    parser.add_argument("--reload", action="store_true")
    args = parser.parse_args()

    if args.dev:
        os.environ["FANSITE_DEV_MODE"] = "true"

    uvicorn.run("fansite.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
