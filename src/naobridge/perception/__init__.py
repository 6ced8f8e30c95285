from ._perception_decoder import PerceptionDecoder
from ._snapshot import (
    ForceResistance,
    GameState,
    HearMessage,
    LineDetection,
    PlayerDetection,
    Polar,
    SensorSnapshot,
)
from ._symbol_tree import Symbol, SymbolNode, parse, parse_message

__all__ = [
    "PerceptionDecoder",
    "SensorSnapshot",
    "Polar",
    "ForceResistance",
    "LineDetection",
    "PlayerDetection",
    "HearMessage",
    "GameState",
    "SymbolNode",
    "Symbol",
    "parse",
    "parse_message",
]
