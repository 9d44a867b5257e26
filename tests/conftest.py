"""
Pytest fixtures for the DMN model tests.

http_server runs a throwaway HTTP server on localhost; tests register
responses in server.routes as {path: (status, body)}.
"""

import json
import socket
import threading
from http.server import BaseHTTPRequestHandler, HTTPServer

import pytest

SIMPLE_DMN = (
    '<definitions id="def1"><decision id="dec1"><decisionTable id="dt1" hitPolicy="UNIQUE">'
    '<input id="i1"><inputExpression id="ie1"><text>age</text></inputExpression></input>'
    '<output id="o1" name="result"/>'
    '<rule id="r1"><inputEntry id="ine1"><text>&gt;18</text></inputEntry>'
    '<outputEntry id="oute1"><text>"adult"</text></outputEntry></rule>'
    "</decisionTable></decision></definitions>"
)

DISH_DMN = """<?xml version="1.0" encoding="UTF-8"?>
<definitions xmlns="http://www.omg.org/spec/DMN/20151101/dmn.xsd"
             id="definitions" name="Dish Definitions"
             namespace="http://camunda.org/schema/1.0/dmn"
             expressionLanguage="juel">
  <decision id="dish" name="Dish">
    <decisionTable id="decisionTable" hitPolicy="FIRST">
      <input id="season" label="Season">
        <inputExpression id="seasonExpression" typeRef="string">
          <text>season</text>
        </inputExpression>
      </input>
      <input id="guestCount" label="How many guests">
        <inputExpression id="guestCountExpression" typeRef="integer" expressionLanguage="feel">
          <text>guestCount</text>
        </inputExpression>
      </input>
      <output id="dishOutput" label="Dish" name="desiredDish" typeRef="string"/>
      <output id="beverageOutput" label="Beverage" name="beverage" typeRef="string"/>
      <rule id="rule1">
        <inputEntry id="rule1Season"><text>"Winter"</text></inputEntry>
        <inputEntry id="rule1Guests"><text>&lt;= 8</text></inputEntry>
        <outputEntry id="rule1Dish"><text>"Spareribs"</text></outputEntry>
        <outputEntry id="rule1Beverage"><text>"Aecht Schlenkerla Rauchbier"</text></outputEntry>
      </rule>
      <rule id="rule2">
        <inputEntry id="rule2Season"><text>"Summer"</text></inputEntry>
        <inputEntry id="rule2Guests"><text></text></inputEntry>
        <outputEntry id="rule2Dish" expressionLanguage="javascript">
          <description>Light dish for warm days</description>
          <text>"Salad"</text>
        </outputEntry>
        <outputEntry id="rule2Beverage"><text></text></outputEntry>
      </rule>
      <rule id="rule3">
        <inputEntry id="rule3Season"><text>"Spring"</text></inputEntry>
        <inputEntry id="rule3Guests"><text>[5..8]</text></inputEntry>
        <outputEntry id="rule3Dish"><text>"Steak"</text></outputEntry>
        <outputEntry id="rule3Beverage"><text>"Apple Juice"</text></outputEntry>
      </rule>
    </decisionTable>
  </decision>
</definitions>
"""

DEFINITION = {
    "id": "dish:1:c633e8a8-41b7-11e6-b0ef-00aa004d0001",
    "key": "dish",
    "category": "http://camunda.org/schema/1.0/dmn",
    "name": "Dish",
    "version": 1,
    "resource": "dish.dmn",
    "deploymentId": "c627175e-41b7-11e6-b0ef-00aa004d0001",
    "tenantId": "tenant1",
    "decisionRequirementsDefinitionId": "dish:1:drd",
    "decisionRequirementsDefinitionKey": "dishDrd",
    "historyTimeToLive": "5",
}


@pytest.fixture
def simple_dmn():
    return SIMPLE_DMN


@pytest.fixture
def dish_dmn():
    return DISH_DMN


@pytest.fixture
def definition_json():
    return dict(DEFINITION)


@pytest.fixture
def definitions_file(tmp_path):
    path = tmp_path / "definitions.json"
    second = {**DEFINITION, "id": "dish:2:xyz", "version": 2}
    path.write_text(json.dumps([DEFINITION, second]), encoding="utf-8")
    return path


@pytest.fixture
def http_server():
    routes = {}

    class Handler(BaseHTTPRequestHandler):
        def do_GET(self):
            status, body = routes.get(self.path, (404, b""))
            if isinstance(body, str):
                body = body.encode("utf-8")
            self.send_response(status)
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

        def log_message(self, format, *args):
            pass

    server = HTTPServer(("127.0.0.1", 0), Handler)
    server.routes = routes
    server.url = f"http://127.0.0.1:{server.server_port}"
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server
    server.shutdown()
    server.server_close()


@pytest.fixture
def closed_port_url():
    """URL of a localhost port nothing listens on."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        port = s.getsockname()[1]
    return f"http://127.0.0.1:{port}/decision-definition"
