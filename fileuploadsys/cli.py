"""Command line entry point with serve, upload and version commands."""

from __future__ import annotations

import argparse
import sys
import urllib.error
import urllib.request
from typing import Optional, Sequence

from fileuploadsys.server import start_http_server

DEFAULT_PORT = "8080"
DEFAULT_CHUNK_SIZE = "256k"
DEFAULT_UPLOAD_URL = "http://localhost:8080/upload"
DEFAULT_TIMEOUT = 5.0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="FileUploadSystem",
        description="Upload files and split them into chunks.",
    )
    parser.add_argument("-t", "--toggle", action="store_true", help="Help message for toggle")
    commands = parser.add_subparsers(dest="command")

    serve = commands.add_parser("serve", help="Run the http upload server.")
    serve.add_argument(
        "-p",
        "--port",
        default=DEFAULT_PORT,
        help="The port for the http server to listen on. (Default: 8080)",
    )

    upload = commands.add_parser(
        "upload",
        help="Upload a file and split the file into chunks",
        description=(
            "Get the uploaded file and split it into chunks. Use --file-path "
            "to choose the file and --chunk-size to decide the size to split "
            "the file, e.g. 1M, 1k, 256k."
        ),
    )
    upload.add_argument("-f", "--file-path", required=True, help="File path to upload.")
    upload.add_argument(
        "-c",
        "--chunk-size",
        default=DEFAULT_CHUNK_SIZE,
        help="Chunk size to split file. Default is 256kB.",
    )

    commands.add_parser("version", help="Show version information.")
    return parser


def run_upload(
    file_path: str,
    chunk_size: str = DEFAULT_CHUNK_SIZE,
    url: str = DEFAULT_UPLOAD_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """Open ``file_path`` and POST to the upload endpoint; return the response body.

    Raises ``RuntimeError`` describing the step that failed.
    """
    print("upload called")
    print(f"filepath: {file_path}, chunkSize: {chunk_size}")

    try:
        handle = open(file_path, "rb")
    except OSError as exc:
        raise RuntimeError(f"Error opening file {file_path}, err: {exc}") from exc

    with handle:
        try:
            request = urllib.request.Request(url, data=b"", method="POST")
        except ValueError as exc:
            raise RuntimeError(f"Error creating new request to {url}, err: {exc}") from exc

        try:
            with urllib.request.urlopen(request, timeout=timeout) as response:
                body = response.read()
        except urllib.error.HTTPError as exc:
            body = exc.read()
        except OSError as exc:
            raise RuntimeError(f"Error sending http request to {url}, err: {exc}") from exc

    text = body.decode("utf-8", errors="replace")
    print("Test result:", text)
    return text


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line interface and return an exit status."""
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else list(argv))

    if args.command == "serve":
        start_http_server(args.port)
    elif args.command == "upload":
        try:
            run_upload(args.file_path, args.chunk_size)
        except RuntimeError as exc:
            print(exc)
            return 1
    elif args.command == "version":
        print("version called")
    else:
        parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())