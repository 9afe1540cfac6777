"""Array views of a Reversi board."""

from .observation import (
    BOARD_CHANNELS,
    build_board_planes,
    decode_cell,
    encode_cell,
    legal_action_mask,
)

__all__ = [
    "BOARD_CHANNELS",
    "build_board_planes",
    "decode_cell",
    "encode_cell",
    "legal_action_mask",
]
