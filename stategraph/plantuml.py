"""PlantUML rendering of a state graph.

Produces the diagram script and the online image links for it. Output order
follows declaration order so the same graph always renders the same text.
"""
from __future__ import annotations

import base64
import zlib
from dataclasses import dataclass

from stategraph.graph import StateGraph
from stategraph.types import END, START

_B64 = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_PUML = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz-_"
_TRANSLATE = str.maketrans(_B64, _PUML)


@dataclass(frozen=True)
class PlantUMLConfig:
    """Rendering options.

    Attributes:
        server: Base URL of the PlantUML server used for the image links.
        highlight_nfa: Mark nondeterministic states and events in red.
    """

    server: str = "https://www.plantuml.com/plantuml"
    highlight_nfa: bool = True

    def __post_init__(self) -> None:
        if not self.server:
            raise ValueError("PlantUML server URL must be non-empty")


def _state_lines(graph: StateGraph, config: PlantUMLConfig) -> list[str]:
    lines = []
    for state, desc in graph.states.items():
        line = f'state "{state}" as {state}'
        if config.highlight_nfa and graph.has_nfa_exit(state):
            line += " <<NFA>>"
        if desc:
            line += f" : {desc}"
        lines.append(line)
    return lines


def _transition_lines(graph: StateGraph, config: PlantUMLConfig) -> list[str]:
    lines = [f"{START} --> {state}" for state in graph.start]
    for transition in graph.records():
        label = f"({transition.event})"
        desc = graph.events.get(transition.event, "")
        if desc:
            label += f" {desc}"
        if config.highlight_nfa and not transition.is_deterministic:
            label = f"<font color=red><b>{label}</b></font>"
        for dest in transition.destinations:
            lines.append(f"{transition.origin} --> {dest} : {label}")
    lines.extend(f"{state} --> {END}" for state in graph.end)
    return lines


def render(graph: StateGraph, config: PlantUMLConfig | None = None) -> str:
    """Return the PlantUML script describing ``graph``."""
    config = config or PlantUMLConfig()
    title = f"<b>[{graph.name}]</b> " if graph.name else ""
    body = _state_lines(graph, config) + [""] + _transition_lines(graph, config)
    indented = "\n".join(f"  {line}" if line else "" for line in body)
    return (
        "@startuml\n"
        "skinparam state {\n"
        "  BackgroundColor<<NFA>> Red\n"
        "}\n"
        f'state "<font color=red><b><<{graph.kind}>></b></font>\\n{title}State Graph" as rootGraph {{\n'
        f"{indented}\n"
        "}\n"
        "@enduml\n"
    )


def encode(text: str) -> str:
    """Deflate ``text`` and encode it with PlantUML's URL alphabet."""
    compressor = zlib.compressobj(9, zlib.DEFLATED, -15)
    data = compressor.compress(text.encode("utf-8")) + compressor.flush()
    # 3-byte groups map to 4 chars; pad instead of emitting "="
    data += b"\0" * (-len(data) % 3)
    return base64.b64encode(data).decode("ascii").translate(_TRANSLATE)


def urls(script: str, config: PlantUMLConfig | None = None) -> tuple[str, str]:
    """Return (png_url, svg_url) for a PlantUML script."""
    config = config or PlantUMLConfig()
    encoded = encode(script)
    base = config.server.rstrip("/")
    return f"{base}/img/~1{encoded}", f"{base}/svg/~1{encoded}"


def show(graph: StateGraph, config: PlantUMLConfig | None = None) -> str:
    """Script plus online links, as one human-readable block."""
    script = render(graph, config)
    img_url, svg_url = urls(script, config)
    return f"\nPlantUml Script:\n{script}\nOnline Graph:\n\tImg: {img_url}\n\tSvg: {svg_url}"
