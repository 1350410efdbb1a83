"""
Strategies module: the Strategy interface and built-in players.
"""
from roshambo.strategies.strategy import Strategy
from roshambo.strategies.random_strategy import RandomBot, RandomDummy
from roshambo.strategies.pattern_strategy import (
    ConstantBot, RockBot, PaperBot, ScissorsBot, CycleBot, CounterLastBot
)
from roshambo.strategies.frequency_strategy import FrequencyBot

# Strategy identity -> class
STRATEGY_TYPES = {
    'random_bot': RandomBot,
    'random_dummy': RandomDummy,
    'rock': RockBot,
    'paper': PaperBot,
    'scissors': ScissorsBot,
    'cycle': CycleBot,
    'counter_last': CounterLastBot,
    'frequency': FrequencyBot,
}


def create_strategy(identity: str) -> Strategy:
    """
    Create a strategy instance from its registered identity.

    Raises:
        ValueError: If the identity is unknown
    """
    if identity not in STRATEGY_TYPES:
        raise ValueError(f"Unknown strategy: {identity}. "
                         f"Available: {list(STRATEGY_TYPES.keys())}")
    return STRATEGY_TYPES[identity]()


__all__ = [
    'Strategy', 'RandomBot', 'RandomDummy',
    'ConstantBot', 'RockBot', 'PaperBot', 'ScissorsBot', 'CycleBot', 'CounterLastBot',
    'FrequencyBot', 'STRATEGY_TYPES', 'create_strategy',
]
