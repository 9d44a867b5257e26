"""
Decision definitions from a DMN engine's REST API.

The base URL comes from env.ENGINE["url"] unless passed explicitly.
"""
from urllib.parse import quote

import env
from dmn_definitions import DefinitionInfo, DefinitionList, DmnXml


def _url(base_url, *parts):
    base_url = (base_url or env.ENGINE["url"]).rstrip("/")
    return "/".join([base_url, "decision-definition", *(quote(str(p), safe="") for p in parts)])


def get_definitions(base_url=None):
    return DefinitionList().read_url(_url(base_url))


def get_definition(definition_id, base_url=None):
    return DefinitionInfo().read_url(_url(base_url, definition_id))


def get_definition_by_key(key, base_url=None):
    return DefinitionInfo().read_url(_url(base_url, "key", key))


def get_dmn_xml(definition_id, base_url=None):
    return DmnXml().read_url(_url(base_url, definition_id, "xml"))


def get_document(definition_id, base_url=None, validate=False):
    return get_dmn_xml(definition_id, base_url).definition(validate=validate)
