"""Game action types - explicit user inputs separated from game state."""

from typing import Literal

from pydantic import BaseModel, Field


class SelectCellAction(BaseModel):
    """Player selects cell N of mini-board M.

    Indices are not range-checked here; the engine rejects out-of-range
    selections with INDEX_OUT_OF_RANGE instead of raising.
    """

    action_type: Literal["select_cell"] = "select_cell"
    board_index: int = Field(..., description="Mini-board index (0-8)")
    cell_index: int = Field(..., description="Cell index within the mini-board (0-8)")


# Only one action type exists, so no discriminated union yet
GameAction = SelectCellAction


def build_action_from_payload(payload: dict) -> SelectCellAction:
    """Build a typed action from a raw payload dict.

    Args:
        payload: Dict with 'action_type' key and action-specific fields.

    Returns:
        The appropriate GameAction subtype.

    Raises:
        ValueError: If action_type is missing or unknown.
    """
    action_type = payload.get("action_type")

    if action_type == "select_cell":
        return SelectCellAction.model_validate(payload)
    else:
        raise ValueError(f"Unknown action type: {action_type}")
