from .parser import NO_MOVES, BotParser, ProtocolError, format_orders

__all__ = ["NO_MOVES", "BotParser", "ProtocolError", "format_orders"]
