"""
Boards bounded context - Domain layer.

This context handles term/definition boards:
- Pair drafts edited before a board, level or pair is saved
- Capacity rules derived from a board's card count
- Level grouping of pairs (card_count / 2 pairs per level)
- Bulk insertion of generated pairs

Aggregates:
- Board: A titled set of pairs with a fixed card count
"""
