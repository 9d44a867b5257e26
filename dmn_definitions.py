"""
Deployment metadata of decision definitions, as served by a DMN engine's
REST API (see https://docs.camunda.org/manual/latest/reference/rest/decision-definition/).

Every record is created empty and filled by one of its read methods:

    definitions = DefinitionList().read_url(url)
    info = DefinitionInfo().read_file("definition.json")
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, TypeAdapter, field_validator

from dmn_model import Definition
from utils.common import read_json, read_json_from_file, read_json_from_url


class JsonRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def __repr__(self):
        return f"{type(self).__name__}({getattr(self, 'name', '') or self.id})"

    @field_validator("*", mode="before")
    @classmethod
    def null_is_zero(cls, value, info):
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    def parse(self, data):
        """Replace every field with the values in data; raises ValidationError."""
        record = type(self).model_validate({} if data is None else data)
        for name in type(self).model_fields:
            setattr(self, name, getattr(record, name))
        return self

    def to_json(self):
        return self.model_dump(by_alias=True)

    def read(self, reader):
        return read_json(self, reader)

    def read_url(self, url):
        return read_json_from_url(self, url)

    def read_file(self, path):
        return read_json_from_file(self, path)


class DefinitionInfo(JsonRecord):
    id: StrictStr = ""
    key: StrictStr = ""
    category: StrictStr = ""
    name: StrictStr = ""
    version: StrictInt = 0
    resource: StrictStr = ""
    deployment_id: StrictStr = Field("", alias="deploymentId")
    tenant_id: StrictStr = Field("", alias="tenantId")
    decision_req_def_id: StrictStr = Field("", alias="decisionRequirementsDefinitionId")
    decision_req_def_key: StrictStr = Field("", alias="decisionRequirementsDefinitionKey")
    history_ttl: StrictStr = Field("", alias="historyTimeToLive")


class DmnXml(JsonRecord):
    """The raw DMN XML document of a deployed decision definition."""

    id: StrictStr = ""
    dmn_xml: StrictStr = Field("", alias="dmnXml")

    def definition(self, validate=False):
        return Definition().read_string(self.dmn_xml, validate=validate)


DEFINITION_LIST = TypeAdapter(List[Optional[DefinitionInfo]])


class DefinitionList(list):
    """Ordered collection of DefinitionInfo records."""

    def parse(self, data):
        self.clear()
        if data is None:
            return self
        # null entries stay as None
        self.extend(DEFINITION_LIST.validate_python(data))
        return self

    def to_json(self):
        return [d.to_json() if d is not None else None for d in self]

    def read(self, reader):
        return read_json(self, reader)

    def read_url(self, url):
        return read_json_from_url(self, url)

    def read_file(self, path):
        return read_json_from_file(self, path)
