"""Command line entrypoint serving the FastAPI application with uvicorn."""

import argparse
import logging

import uvicorn


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser()
    parser.add_argument("--docker", action="store_true", help="Running with docker")
    parser.add_argument("--host", required=True, help="Application host.")
    parser.add_argument("--port", required=True, help="Application port.")
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development purposes.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    if not args.docker:
        from dotenv import load_dotenv

        load_dotenv("../../.env")

    logger.info("Serving on %s:%s", args.host, args.port)
    uvicorn.run(
        "chat_system.main:create_app",
        factory=True,
        host=args.host,
        port=int(args.port),
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
