"""
Boards bounded context - Application layer.

Contains the pair editor and its call sites:
- Services: PairCollectionController, AcceptanceGate, BoardEditSession
- Use Cases: Generate pairs, create board, add level, edit board
"""
