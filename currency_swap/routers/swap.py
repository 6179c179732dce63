from fastapi import APIRouter, Depends

from currency_swap.core.config import Settings
from currency_swap.models.swap import FormStateOut, SwapFieldsIn
from currency_swap.services.money import format_amount
from currency_swap.services.session import SwapSession, get_session, get_settings_dep
from currency_swap.services.swap_form import SwapFormController

router = APIRouter(prefix="/swap", tags=["swap"])

# Dependencies -----------------------------------------------------


def get_form(session: SwapSession = Depends(get_session)) -> SwapFormController:
    return session.form


# Helpers ----------------------------------------------------------


def _state_out(form: SwapFormController, settings: Settings) -> FormStateOut:
    state = form.state
    return FormStateOut(
        **state.model_dump(),
        to_amount_display=format_amount(state.to_amount, settings.amount_display_places),
    )


# Routes -----------------------------------------------------------
@router.get("", response_model=FormStateOut, summary="Current swap form state")
async def get_form_state(
    form: SwapFormController = Depends(get_form),
    settings: Settings = Depends(get_settings_dep),
):
    return _state_out(form, settings)


@router.patch("", response_model=FormStateOut, summary="Edit one or more form fields")
async def edit_fields(
    payload: SwapFieldsIn,
    form: SwapFormController = Depends(get_form),
    settings: Settings = Depends(get_settings_dep),
):
    # each supplied field is one edit event
    supplied = payload.model_fields_set
    if "from_currency" in supplied:
        form.set_from_currency(payload.from_currency)
    if "to_currency" in supplied:
        form.set_to_currency(payload.to_currency)
    if "from_amount" in supplied:
        form.set_from_amount(payload.from_amount)
    return _state_out(form, settings)


@router.post("/submit", response_model=FormStateOut, summary="Convert the entered amount")
async def submit(
    form: SwapFormController = Depends(get_form),
    settings: Settings = Depends(get_settings_dep),
):
    form.submit()
    return _state_out(form, settings)


@router.post("/reset", response_model=FormStateOut, summary="Clear the form")
async def reset(
    form: SwapFormController = Depends(get_form),
    settings: Settings = Depends(get_settings_dep),
):
    form.reset()
    return _state_out(form, settings)
