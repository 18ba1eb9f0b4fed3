"""Gymnasium environment for Notakto."""

from .gym_env import NotaktoEnv

__all__ = ["NotaktoEnv"]
