"""Screen controllers rendered by the navigation shell."""

from .banners import BannerState
from .product_list import (
    DELETE_PROMPT,
    FETCH_ERROR,
    ConfirmGate,
    ProductListController,
    decline_all,
)
from .registration import SUCCESS_MESSAGE, RegisteredCallback, RegistrationController

__all__ = [
    "BannerState",
    "ConfirmGate",
    "DELETE_PROMPT",
    "FETCH_ERROR",
    "ProductListController",
    "RegisteredCallback",
    "RegistrationController",
    "SUCCESS_MESSAGE",
    "decline_all",
]
