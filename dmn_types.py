"""
DMN 1.1 decision table elements.

See https://docs.camunda.org/manual/7.4/reference/dmn11/decision-table/

Elements and attributes are matched by local name, so documents with the
DMN namespace declared and documents without any namespace parse the same.
"""
from dmn_errors import InvalidDecisionTable

# Holds all classes defined with dmn_tag decorator
DMN_MAPPINGS = {}


def dmn_tag(tag):
    def wrap(object):
        object.tag = tag
        DMN_MAPPINGS[tag] = object
        return object

    return wrap


def local_name(name):
    return name.rpartition("}")[2]


def attribute(element, name):
    if name in element.attrib:
        return element.attrib[name]
    for key, value in element.attrib.items():
        if local_name(key) == name:
            return value
    return ""


def child_text(element, tag):
    """
    Character data directly inside the first <tag> child, nested elements
    skipped. When <tag> is repeated the first one wins, like find().
    """
    child = element.find(f"{{*}}{tag}")
    if child is None:
        return ""
    return (child.text or "") + "".join(c.tail or "" for c in child)


def parse_child(element, tag):
    child = element.find(f"{{*}}{tag}")
    if child is None:
        return None
    return DMN_MAPPINGS[tag]().parse(child)


def parse_children(element, tag):
    return [DMN_MAPPINGS[tag]().parse(c) for c in element.findall(f"{{*}}{tag}")]


class DmnObject(object):
    def __init__(self):
        self._id = ""

    def __repr__(self):
        return f"{type(self).__name__}({getattr(self, 'name', '') or self._id})"

    def __eq__(self, other):
        return type(self) is type(other) and self.to_json() == other.to_json()

    def parse(self, element):
        self._id = attribute(element, "id")
        return self

    def to_json(self):
        return {"id": self._id}


@dmn_tag("decision")
class Decision(DmnObject):
    def __init__(self):
        super(Decision, self).__init__()
        self.name = ""
        self.decision_table = None

    def parse(self, element):
        super(Decision, self).parse(element)
        self.name = attribute(element, "name")
        self.decision_table = parse_child(element, "decisionTable")
        return self

    def to_json(self):
        return {
            **super(Decision, self).to_json(),
            "name": self.name,
            "decisionTable": self.decision_table.to_json() if self.decision_table else None,
        }


@dmn_tag("decisionTable")
class DecisionTable(DmnObject):
    """
    Decision logic depicted as a table: input clauses, output clauses and
    rules. The hit policy is kept as written in the document; an absent
    hitPolicy attribute stays empty.
    """

    def __init__(self):
        super(DecisionTable, self).__init__()
        self.hit_policy = ""
        self.inputs = []
        self.outputs = []
        self.rules = []

    def parse(self, element):
        super(DecisionTable, self).parse(element)
        self.hit_policy = attribute(element, "hitPolicy")
        self.inputs = parse_children(element, "input")
        self.outputs = parse_children(element, "output")
        self.rules = parse_children(element, "rule")
        return self

    def validate(self):
        """
        Check that every rule has one input entry per input clause and one
        output entry per output clause, and that output names are unique
        when there is more than one output.
        """
        names = [o.name for o in self.outputs]
        if len(names) > 1 and len(set(names)) != len(names):
            raise InvalidDecisionTable(self._id, f"output names are not unique: {names}")
        for rule in self.rules:
            if len(rule.input_entries) != len(self.inputs):
                raise InvalidDecisionTable(
                    self._id,
                    f"rule {rule._id} has {len(rule.input_entries)} input entries for {len(self.inputs)} inputs",
                )
            if len(rule.output_entries) != len(self.outputs):
                raise InvalidDecisionTable(
                    self._id,
                    f"rule {rule._id} has {len(rule.output_entries)} output entries for {len(self.outputs)} outputs",
                )
        return self

    def to_json(self):
        return {
            **super(DecisionTable, self).to_json(),
            "hitPolicy": self.hit_policy,
            "input": [i.to_json() for i in self.inputs],
            "output": [o.to_json() for o in self.outputs],
            "rule": [r.to_json() for r in self.rules],
        }


@dmn_tag("input")
class Input(DmnObject):
    """
    Input clause. The label is a short description of the input and is not
    required. The schema allows several input expressions; in practice
    there is one.
    """

    def __init__(self):
        super(Input, self).__init__()
        self.label = ""
        self.input_expressions = []

    def __repr__(self):
        return f"{type(self).__name__}({self.label or self._id})"

    def parse(self, element):
        super(Input, self).parse(element)
        self.label = attribute(element, "label")
        self.input_expressions = parse_children(element, "inputExpression")
        return self

    def to_json(self):
        return {
            **super(Input, self).to_json(),
            "label": self.label,
            "inputExpression": [e.to_json() for e in self.input_expressions],
        }


@dmn_tag("inputExpression")
class InputExpression(DmnObject):
    """
    How the value of an input clause is produced. typeRef names the type the
    result is converted to; an empty expressionLanguage means the one
    declared on <definitions> applies.
    """

    def __init__(self):
        super(InputExpression, self).__init__()
        self.type_ref = ""
        self.expression_language = ""
        self.text = ""

    def parse(self, element):
        super(InputExpression, self).parse(element)
        self.type_ref = attribute(element, "typeRef")
        self.expression_language = attribute(element, "expressionLanguage")
        self.text = child_text(element, "text")
        return self

    def to_json(self):
        return {
            **super(InputExpression, self).to_json(),
            "typeRef": self.type_ref,
            "expressionLanguage": self.expression_language,
            "text": self.text,
        }


@dmn_tag("output")
class Output(DmnObject):
    def __init__(self):
        super(Output, self).__init__()
        self.label = ""
        self.name = ""
        self.type_ref = ""

    def parse(self, element):
        super(Output, self).parse(element)
        self.label = attribute(element, "label")
        self.name = attribute(element, "name")
        self.type_ref = attribute(element, "typeRef")
        return self

    def to_json(self):
        return {
            **super(Output, self).to_json(),
            "label": self.label,
            "name": self.name,
            "typeRef": self.type_ref,
        }


@dmn_tag("rule")
class Rule(DmnObject):
    """
    A row of the table. Entries line up by position with the table's input
    and output clauses.
    """

    def __init__(self):
        super(Rule, self).__init__()
        self.input_entries = []
        self.output_entries = []

    def parse(self, element):
        super(Rule, self).parse(element)
        self.input_entries = parse_children(element, "inputEntry")
        self.output_entries = parse_children(element, "outputEntry")
        return self

    def to_json(self):
        return {
            **super(Rule, self).to_json(),
            "inputEntry": [e.to_json() for e in self.input_entries],
            "outputEntry": [e.to_json() for e in self.output_entries],
        }


@dmn_tag("inputEntry")
class InputEntry(DmnObject):
    # Empty text is always satisfied
    def __init__(self):
        super(InputEntry, self).__init__()
        self.expression_language = ""
        self.text = ""

    def parse(self, element):
        super(InputEntry, self).parse(element)
        self.expression_language = attribute(element, "expressionLanguage")
        self.text = child_text(element, "text")
        return self

    def to_json(self):
        return {
            **super(InputEntry, self).to_json(),
            "expressionLanguage": self.expression_language,
            "text": self.text,
        }


@dmn_tag("outputEntry")
class OutputEntry(DmnObject):
    # Empty text means the output is left out of the result
    def __init__(self):
        super(OutputEntry, self).__init__()
        self.expression_language = ""
        self.description = ""
        self.text = ""

    def parse(self, element):
        super(OutputEntry, self).parse(element)
        self.expression_language = attribute(element, "expressionLanguage")
        self.description = child_text(element, "description")
        self.text = child_text(element, "text")
        return self

    def to_json(self):
        return {
            **super(OutputEntry, self).to_json(),
            "expressionLanguage": self.expression_language,
            "description": self.description,
            "text": self.text,
        }
