import json
from typing import Any

from challonge.core.errors import DecodeError


def parse_payload(content: str) -> Any:
    """
    Parses a response body into the plain dict/list tree the decoders expect.
    Raises DecodeError if the body is not valid JSON.
    """
    try:
        return json.loads(content)
    except json.JSONDecodeError:
        raise DecodeError("Invalid JSON", content) from None


def read_json_file(filepath: str) -> Any:
    with open(filepath, 'r') as f:
        return parse_payload(f.read())
