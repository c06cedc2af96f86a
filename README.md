# fileuploadsys

A small tool with two parts. One splits a byte stream into fixed-size chunk
files on disk. The other is a minimal HTTP server with an upload endpoint.
It uses only the standard library.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Command line

The `fileuploadsys` command has three subcommands: `serve`, `upload` and
`version`. If you give no subcommand, it prints the help. It also accepts a
`-t`/`--toggle` flag, which has no effect.

### serve

Starts the HTTP server on all interfaces. The port is 8080 unless you give
another one with `--port` (`-p`):

```
fileuploadsys serve
fileuploadsys serve --port 9000
```

The server runs until it is interrupted. If it cannot bind to the port, the
command exits with `Failed to run http server, err: ...`.

`POST /upload` answers `200` with the JSON string `"upload successfully!"`. A
`POST` to any other path answers `404` with `404 page not found`. The server
reads any request body it is sent and then discards it.

### upload

```
fileuploadsys upload --file-path ./data.bin --chunk-size 256k
```

`--file-path` (`-f`) is required. `--chunk-size` (`-c`) defaults to `256k`.
The command opens the file to check that it can be read, then sends an empty
`POST` to `http://localhost:8080/upload` with a 5-second timeout. It prints
the response body after `Test result:`. If the file cannot be opened or the
request fails, it prints the error and exits with status 1.

### version

```
fileuploadsys version
```

Prints `version called`.

## Library use

```python
from fileuploadsys.chunker import split_file
from fileuploadsys.datastore import save_chunk_to_file

with open("data.bin", "rb") as source:
    paths = split_file(source, 256 * 1024, "repo")

save_chunk_to_file(b"This is a test message.", "test.txt")
```

- `fileuploadsys.chunker.split_file(file, chunksize, repo_path)` reads `file`
  in pieces of `chunksize` bytes. It writes piece `n` to
  `<repo_path>/outputChunk_<n>`, with `n` counting up from 0, and returns the
  written paths in order. The `repo_path` directory must already exist. A
  `chunksize` of zero or less raises `ValueError`.
- `fileuploadsys.datastore.save_chunk_to_file(chunk, name)` creates or
  truncates the file `name` and writes `chunk` to it. It raises `OSError` if
  the file cannot be written.
- `fileuploadsys.server.make_server(host, port)` returns a
  `ThreadingHTTPServer` that serves requests with `UploadHandler`.
  `fileuploadsys.server.start_http_server(port)` serves on all interfaces
  until the process is interrupted.
- `fileuploadsys.cli.run_upload(file_path, chunk_size, url, timeout)` performs
  the `upload` command's request and returns the response body as text. It
  raises `RuntimeError` if the file cannot be opened or the request fails.

## Limitations

- The `upload` command does not send the file's contents. It does not split
  the file either. `--chunk-size` is printed but neither parsed nor used.
- The server does not store anything it receives. The upload endpoint only
  acknowledges the request.
- Chunking is available from Python through `split_file`. No command runs it.
- No deduplication or versioned storage of chunks is provided.