"""Application use cases package."""

from .delete_product import DeleteProductUseCase
from .load_user_state import LoadUserStateUseCase
from .save_user_state import MergeWriteResult, SaveUserStateUseCase, merge_write
from .state_document import decode_state, encode_profile, encode_state
from .update_profile import UpdateProfileUseCase

__all__ = [
    "DeleteProductUseCase",
    "LoadUserStateUseCase",
    "SaveUserStateUseCase",
    "MergeWriteResult",
    "merge_write",
    "UpdateProfileUseCase",
    "decode_state",
    "encode_state",
    "encode_profile",
]
