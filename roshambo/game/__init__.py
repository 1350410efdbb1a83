"""
Game module: the rock-paper-scissors move engine.
"""
from roshambo.game.move import Move, versus

__all__ = ['Move', 'versus']
