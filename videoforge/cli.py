"""VideoForge CLI: run the demo server, check it, or generate a video against it."""

import argparse
import json
import sys
import threading

import requests

from videoforge.client import COMPLETED, GENERATING, GenerationSession, VideoForgeClient
from videoforge.config import DEFAULT_BASE_URL

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_REJECTED = 2


def _progress_printer():
    last_shown = {}
    lock = threading.Lock()

    def on_change(requests):
        with lock:
            for r in requests:
                if r.status != GENERATING:
                    continue
                pct = int(round(r.progress))
                if last_shown.get(r.id) != pct:
                    last_shown[r.id] = pct
                    print(f"  {pct}% Complete", flush=True)

    return on_change


def _generate(args) -> int:
    session = GenerationSession(VideoForgeClient(base_url=args.url))
    if not args.json:
        session.subscribe(_progress_printer())

    request_id = session.submit(args.prompt)
    if request_id is None:
        print("Prompt is empty; nothing to generate.", file=sys.stderr)
        return EXIT_REJECTED

    record = session.wait(request_id)

    if args.json:
        print(json.dumps(record.to_dict(), indent=2))
    elif record.status == COMPLETED:
        print(f"Video ready: {record.url}")
    else:
        print("Generation Failed")

    return EXIT_OK if record.status == COMPLETED else EXIT_FAILED


def _health(args) -> int:
    client = VideoForgeClient(base_url=args.url)
    try:
        result = client.health()
    except (requests.exceptions.RequestException, ValueError) as e:
        print(f"Server unreachable at {args.url}: {e}", file=sys.stderr)
        return EXIT_FAILED

    if args.json:
        print(json.dumps(result, indent=2))
    else:
        print(f"OK  build={result.get('build', '?')}  provider={result.get('provider', '?')}")
    return EXIT_OK if result.get("ok") else EXIT_FAILED


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="videoforge",
        description="VideoForge.AI: prompt-to-video demo",
    )
    sub = parser.add_subparsers(dest="command")

    srv = sub.add_parser("serve", help="Run the demo web server")
    srv.add_argument("--host", default=None, help="Bind address (default: HOST env or 0.0.0.0)")
    srv.add_argument("--port", type=int, default=None, help="Port (default: PORT env or 8000)")

    gen = sub.add_parser("generate", help="Generate a video from a prompt")
    gen.add_argument("prompt", help="Text prompt describing the video")
    gen.add_argument("--url", default=DEFAULT_BASE_URL, help="VideoForge base URL")
    gen.add_argument("--json", action="store_true", help="Print the final record as JSON")

    hl = sub.add_parser("health", help="Check server health")
    hl.add_argument("--url", default=DEFAULT_BASE_URL, help="VideoForge base URL")
    hl.add_argument("--json", action="store_true", help="Machine-readable JSON output")

    args = parser.parse_args(argv)

    if args.command == "serve":
        from videoforge.start import serve

        serve(host=args.host, port=args.port)
        return EXIT_OK

    if args.command == "generate":
        return _generate(args)

    if args.command == "health":
        return _health(args)

    parser.print_help()
    return EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
