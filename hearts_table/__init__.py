"""
The card game Hearts for one human and three computer players.

:mod:`hearts_table.engine` holds the rules and the round state,
:mod:`hearts_table.game` plays whole games with player strategies.
"""
