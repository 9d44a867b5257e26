from dmn_types import *
from utils.common import read_xml, read_xml_from_string
from utils.log import get_logger

logger = get_logger(__name__)


@dmn_tag("definitions")
class Definition(DmnObject):
    """
    Root of a DMN document.

    Only one decision per document is modelled: the first <decision> element
    is parsed and any further ones are skipped.

    xmlns is the namespace of the root element itself, whether it was bound
    with a plain xmlns attribute or through a prefix such as xmlns:dmn.

        d = Definition().read_string(dmn_xml)
        d.decision.decision_table.rules
    """

    def __init__(self):
        super(Definition, self).__init__()
        self.xml_name = ""
        self.xmlns = ""
        self.name = ""
        self.expression_language = ""
        self.namespace = ""
        self.decision = None

    def parse(self, element):
        super(Definition, self).parse(element)
        self.xml_name = local_name(element.tag)
        # ElementTree folds xmlns into the tag
        self.xmlns = element.tag[1:].partition("}")[0] if element.tag.startswith("{") else ""
        self.name = attribute(element, "name")
        self.namespace = attribute(element, "namespace")
        self.expression_language = attribute(element, "expressionLanguage") or child_text(
            element, "expressionLanguage"
        )
        decisions = element.findall("{*}decision")
        if len(decisions) > 1:
            logger.warning(
                "Definition %s has %d decisions, only the first is kept", self._id, len(decisions)
            )
        self.decision = DMN_MAPPINGS["decision"]().parse(decisions[0]) if decisions else None
        return self

    def validate(self):
        if self.decision and self.decision.decision_table:
            self.decision.decision_table.validate()
        return self

    def to_json(self):
        return {
            **super(Definition, self).to_json(),
            "xmlns": self.xmlns,
            "name": self.name,
            "expressionLanguage": self.expression_language,
            "namespace": self.namespace,
            "decision": self.decision.to_json() if self.decision else None,
        }

    def read(self, reader, validate=False):
        read_xml(self, reader)
        return self.validate() if validate else self

    def read_string(self, text, validate=False):
        read_xml_from_string(self, text)
        return self.validate() if validate else self
