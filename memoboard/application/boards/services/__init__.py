from .acceptance_gate import AcceptanceGate
from .board_edit_session import BoardEditSession
from .pair_collection_controller import PairCollectionController

__all__ = ["AcceptanceGate", "BoardEditSession", "PairCollectionController"]
