"""GitCoins webhook dispatcher.

Turns GitHub webhook deliveries (``createKey`` comments, pushes and pull
request reviews) into workflow invocations that register contributor keys
and issue GitCoin rewards.
"""
