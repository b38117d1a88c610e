"""Answering HTTP GET requests from the files of one directory."""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Union

PathLike = Union[str, os.PathLike]

DEFAULT_PAGE = "default.html"
LINKS_PLACEHOLDER = "<!-- LINKS_PLACEHOLDER -->"
TEMPLATE_LIMIT = 4096
INDEX_EXTENSIONS = ("html", "txt", "css", "png", "py", "php")

OK_HTML_HEADER = "HTTP/1.1 200 OK\r\nContent-Type: text/html\r\n\r\n"
NOT_FOUND_RESPONSE = (
    "HTTP/1.1 404 Not Found\r\nContent-Type: text/html\r\n\r\n"
    "<html><body><title>Page not found</title><h1>404 Not Found</h1>"
    "<p>The requested file was not found.</p></body></html>"
)
_SERVER_ERROR_HEAD = (
    "HTTP/1.1 500 Internal Server Error\r\nContent-Type: text/html\r\n\r\n"
    "<html><body><h1>500 Internal Server Error</h1><p>"
)
_SERVER_ERROR_TAIL = "</p></body></html>"

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class Extension(Enum):
    """File types served, each with its suffix and response header."""

    UNKNOWN = ("unknown", "HTTP/1.1 415 Unsupported Media Type\r\n\r\n")
    HTML = (".html", "HTTP/1.1 200 OK\r\nContent-Type: text/html\r\n\r\n")
    CSS = (".css", "HTTP/1.1 200 OK\r\nContent-Type: text/css\r\n\r\n")
    JS = (".js", "HTTP/1.1 200 OK\r\nContent-Type: application/javascript\r\n\r\n")
    PNG = (".png", "HTTP/1.1 200 OK\r\nContent-Type: image/png\r\n\r\n")

    def __init__(self, suffix: str, header: str) -> None:
        self.suffix = suffix
        self.header = header


@dataclass(frozen=True)
class Request:
    """The request line of an HTTP request; missing parts are empty."""

    method: str = ""
    path: str = ""
    protocol: str = ""


def parse_request(message: Union[str, bytes]) -> Request:
    """Read method, path and protocol, the first three words of ``message``."""
    if isinstance(message, bytes):
        message = message.split(b"\0", 1)[0].decode(_ENCODING, _ERRORS)
    words = message.split()[:3]
    return Request(*words)


def get_extension(suffix: str) -> Extension:
    """Return the file type whose suffix (dot included) is ``suffix``."""
    for extension in Extension:
        if extension is not Extension.UNKNOWN and extension.suffix == suffix:
            return extension
    return Extension.UNKNOWN


def response_header(extension: Extension) -> bytes:
    """Return the response header sent before a file of this type."""
    return extension.header.encode("ascii")


def search_file(filename: str, directory: PathLike = ".") -> bool:
    """Return whether ``directory`` has an entry named exactly ``filename``."""
    try:
        return filename in os.listdir(directory)
    except OSError:
        return False


def render_index(template: str, names: Iterable[str]) -> str:
    """Replace the links placeholder in ``template`` with links to ``names``.

    Names are grouped by extension in the order of ``INDEX_EXTENSIONS``;
    other names and the default page itself are left out. A template
    without the placeholder comes back unchanged.
    """
    position = template.find(LINKS_PLACEHOLDER)
    if position < 0:
        return template
    categories: dict[str, list[str]] = {ext: [] for ext in INDEX_EXTENSIONS}
    for name in names:
        dot = name.rfind(".")
        if dot < 0 or name == DEFAULT_PAGE:
            continue
        suffix = name[dot + 1:]
        if suffix in categories:
            categories[suffix].append(
                f"<li> <a href='{name}' target='_blank'>{name}</a></li>"
            )
    sections = "".join(
        f"<div class='file-category'><br><strong>{ext}:</strong><br>{''.join(links)}</div>"
        for ext, links in categories.items()
        if links
    )
    links_section = f"<div class='file-types'>{sections}</div>"
    return (
        template[:position]
        + links_section
        + template[position + len(LINKS_PLACEHOLDER):]
    )


def run_php(path: str, directory: PathLike = ".") -> bytes:
    """Run the script named by the request ``path`` through PHP; return its output.

    The first character of ``path`` (its leading slash) is dropped. Raises
    ``OSError`` when PHP cannot be started.
    """
    command = [
        "php", "-d", "display_errors=1", "-d", "error_reporting=E_ALL", path[1:],
    ]
    completed = subprocess.run(
        command, cwd=directory, stdout=subprocess.PIPE, check=False
    )
    return completed.stdout


def _server_error(reason: str) -> bytes:
    return (_SERVER_ERROR_HEAD + reason + _SERVER_ERROR_TAIL).encode("ascii")


def _index_response(directory: Path) -> bytes:
    try:
        names = sorted(os.listdir(directory))
    except OSError:
        return _server_error("Could not open directory.")
    try:
        with open(directory / DEFAULT_PAGE, "rb") as page:
            raw = page.read(TEMPLATE_LIMIT)
    except OSError:
        return _server_error("Could not open default.html.")
    template = raw.split(b"\0", 1)[0].decode(_ENCODING, _ERRORS)
    body = render_index(template, names)
    return OK_HTML_HEADER.encode("ascii") + body.encode(_ENCODING, _ERRORS)


def _file_response(path: str, directory: Path) -> bytes:
    try:
        content = (directory / path[1:]).read_bytes()
    except OSError:
        return b""
    dot = path.rfind(".")
    if dot < 0:
        return b""
    return response_header(get_extension(path[dot:])) + content


def handle_request(message: Union[str, bytes], directory: PathLike = ".") -> bytes:
    """Return the whole response to ``message``; empty when nothing is sent.

    Only GET requests are answered: the root lists the directory through
    its default page, PHP scripts are run, existing files are sent with a
    header chosen by their extension, and anything else is not found.
    """
    request = parse_request(message)
    if not request.method.startswith("GET"):
        return b""
    root = Path(directory)
    path = request.path
    if path in ("", "/"):
        return _index_response(root)
    if ".php" in path:
        try:
            output = run_php(path, root)
        except OSError:
            return _server_error("Could not execute script.")
        return OK_HTML_HEADER.encode("ascii") + output
    if search_file(path[1:], root):
        return _file_response(path, root)
    return NOT_FOUND_RESPONSE.encode("ascii")