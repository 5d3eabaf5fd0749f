"""Tests for PlantUML rendering."""
import base64
import zlib

import pytest

from stategraph import PlantUMLConfig, StateMachine, Transition
from stategraph.plantuml import encode, render, show, urls


def _machine():
    sm = StateMachine("order")
    sm.declare_states({"new": "awaiting payment", "paid": "", "shipped": "", "lost": ""})
    sm.declare_events({"pay": "customer paid", "ship": ""})
    sm.declare_start(["new"])
    sm.declare_end(["shipped", "lost"])
    sm.add_transitions(
        Transition("new", "pay", ["paid"]),
        Transition("paid", "ship", ["shipped", "lost"]),
    )
    return sm


def _decode(text):
    alphabet = str.maketrans(
        "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz-_",
        "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/",
    )
    raw = base64.b64decode(text.translate(alphabet))
    return zlib.decompressobj(-15).decompress(raw).decode("utf-8")


class TestRender:
    """Test cases for the PlantUML script."""

    def test_header_and_kind(self):
        script = render(_machine().graph)
        assert script.startswith("@startuml\n")
        assert script.rstrip().endswith("@enduml")
        assert "<<NFA>></b></font>\\n<b>[order]</b> State Graph" in script

    def test_dfa_without_name(self):
        sm = StateMachine()
        sm.declare_states({"a": "", "b": ""})
        sm.add_transitions(Transition("a", "go", ["b"]))

        script = render(sm.graph)

        assert "<<DFA>></b></font>\\nState Graph" in script
        assert "a --> b : (go)" in script

    def test_state_lines(self):
        script = render(_machine().graph)
        assert 'state "new" as new : awaiting payment' in script
        assert 'state "paid" as paid <<NFA>>' in script
        assert 'state "shipped" as shipped\n' in script

    def test_transition_lines_in_order(self):
        lines = [line.strip() for line in render(_machine().graph).splitlines()]
        start = lines.index("[*] --> new")
        assert lines[start:start + 6] == [
            "[*] --> new",
            "new --> paid : (pay) customer paid",
            "paid --> shipped : <font color=red><b>(ship)</b></font>",
            "paid --> lost : <font color=red><b>(ship)</b></font>",
            "shipped --> [*]",
            "lost --> [*]",
        ]

    def test_highlight_disabled(self):
        script = render(_machine().graph, PlantUMLConfig(highlight_nfa=False))
        assert "paid --> lost : (ship)" in script
        assert 'state "paid" as paid <<NFA>>' not in script


class TestEncoding:
    """Test cases for URL encoding."""

    def test_encode_uses_url_safe_alphabet(self):
        encoded = encode("@startuml\na --> b\n@enduml")
        assert set(encoded) <= set(
            "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz-_"
        )
        assert len(encoded) % 4 == 0

    def test_encode_decodes_back(self):
        script = render(_machine().graph)
        assert _decode(encode(script)) == script

    def test_urls(self):
        img, svg = urls("a --> b", PlantUMLConfig(server="http://localhost:8080/"))
        encoded = encode("a --> b")
        assert img == f"http://localhost:8080/img/~1{encoded}"
        assert svg == f"http://localhost:8080/svg/~1{encoded}"

    def test_empty_server_rejected(self):
        with pytest.raises(ValueError, match="non-empty"):
            PlantUMLConfig(server="")


def test_show_contains_script_and_links():
    sm = _machine()
    text = sm.show()
    assert text == show(sm.graph)
    assert "PlantUml Script:\n@startuml" in text
    assert "\tImg: https://www.plantuml.com/plantuml/img/~1" in text
    assert "\tSvg: https://www.plantuml.com/plantuml/svg/~1" in text


def test_show_does_not_freeze():
    sm = _machine()
    sm.show()
    assert sm.frozen is False
