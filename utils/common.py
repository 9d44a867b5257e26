import io
import json
import re
import xml.etree.ElementTree as ET

import requests
from pydantic import ValidationError

from dmn_errors import DecodeError, FileError, NetworkError
from utils.log import get_logger

logger = get_logger(__name__)

XML_ENCODING = re.compile(rb"""^(?:\xef\xbb\xbf)?\s*<\?xml[^>]*?\sencoding\s*=\s*["']([^"']*)["']""")


def _source_name(reader):
    return getattr(reader, "name", None) or type(reader).__name__


# Targets implement parse(data) for the decoded JSON value or the XML root.
def read_json(target, reader, source=None):
    source = source or _source_name(reader)
    try:
        data = json.load(reader)
    except (ValueError, UnicodeDecodeError, RecursionError) as e:
        # JSONDecodeError is a ValueError, RecursionError comes from deep nesting
        raise DecodeError(source, e) from e
    try:
        target.parse(data)
    except ValidationError as e:
        raise DecodeError(source, e) from e
    return target


def read_xml(target, reader):
    """Only UTF-8 documents are read; any other declared encoding is a DecodeError."""
    source = _source_name(reader)
    data = reader.read()
    if isinstance(data, str):
        data = data.encode("utf-8")
    declared = XML_ENCODING.match(data)
    if declared and declared.group(1).decode("ascii", "replace").lower() != "utf-8":
        raise DecodeError(source, f"unsupported encoding {declared.group(1).decode('ascii', 'replace')!r}")
    try:
        root = ET.fromstring(data)
    except (ET.ParseError, ValueError) as e:
        raise DecodeError(source, e) from e
    target.parse(root)
    return target


def read_xml_from_string(target, text):
    return read_xml(target, io.BytesIO(text.encode("utf-8")))


def read_json_from_url(target, url):
    logger.debug("GET %s", url)
    try:
        response = requests.get(url)
    except requests.RequestException as e:
        raise NetworkError(url, e) from e
    with response:
        if not response.ok:
            logger.warning("GET %s returned %s, decoding body anyway", url, response.status_code)
        return read_json(target, io.BytesIO(response.content), source=url)


def read_json_from_file(target, path):
    logger.debug("Reading %s", path)
    try:
        fh = open(path, "rb")
    except (OSError, ValueError) as e:
        # ValueError for paths with embedded null bytes
        raise FileError(path, e) from e
    with fh:
        return read_json(target, fh, source=path)
