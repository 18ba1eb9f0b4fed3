"""Feature extraction helpers for Notakto."""

from .observation import aux_vector_size, build_aux_vector, build_board_tensor

__all__ = [
    "aux_vector_size",
    "build_aux_vector",
    "build_board_tensor",
]
