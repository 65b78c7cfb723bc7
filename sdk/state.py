# sdk/state.py
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .models import Failure, Product, Success


class ViewState(BaseModel):
    """What the UI shows. Only FetchOrchestrator writes it, through the reducers below."""
    model_config = ConfigDict(frozen=True)

    products: Tuple[Product, ...] = ()
    reported_count: int = 0
    loading: bool = False
    error: Optional[Failure] = None


# ---------------------------
# Reducers
# ---------------------------
def loading_started(state: ViewState) -> ViewState:
    # a new attempt never shows the previous attempt's products
    return ViewState(loading=True)


def load_succeeded(state: ViewState, result: Success) -> ViewState:
    return ViewState(products=result.items, reported_count=result.count)


def load_failed(state: ViewState, result: Failure) -> ViewState:
    return ViewState(error=result)
