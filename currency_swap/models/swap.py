from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field


class FormPhase(str, Enum):
    EDITING = "editing"
    SUBMITTED = "submitted"


class FormState(BaseModel):
    """Swap form fields as shown to the user. Empty fields are `""` / None."""

    from_currency: str = ""
    to_currency: str = ""
    from_amount: Optional[float] = None
    to_amount: float = 0.0
    error: Optional[str] = None
    phase: FormPhase = FormPhase.EDITING


class SwapFieldsIn(BaseModel):
    """Partial form edit; only supplied fields are applied."""

    from_currency: Optional[str] = Field(None, description="Source currency symbol ('' clears)")
    to_currency: Optional[str] = Field(None, description="Target currency symbol ('' clears)")
    from_amount: Optional[Union[float, str]] = Field(
        None, description="Amount as typed; unparseable or zero clears the field"
    )


class FormStateOut(FormState):
    to_amount_display: str
