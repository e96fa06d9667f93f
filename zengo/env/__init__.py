"""Gymnasium environment for ZenGo."""

from .gym_env import ZenGoEnv

__all__ = ["ZenGoEnv"]
