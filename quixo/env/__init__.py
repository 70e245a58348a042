"""Gymnasium environment wrapping the turn controller."""

from .gym_env import QuixoEnv

__all__ = ["QuixoEnv"]
