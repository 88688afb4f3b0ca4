"""Main routes for the Zakat calculator form."""
from flask import Blueprint, current_app, render_template, request

from quickzakat.constants import ASSET, LIABILITY, NISAB_GRAMS
from quickzakat.data.currencies import get_ordered_currencies
from quickzakat.services.form_state import (
    dispatch_all,
    events_from_form,
    initial_state,
    state_from_form,
)
from quickzakat.services.formatting import format_result
from quickzakat.services.locale_detect import UserEnvironment, initial_currency

main_bp = Blueprint('main', __name__)


def environment_from_request(req, default_timezone=None) -> UserEnvironment:
    """Locale preferences from Accept-Language (quality order) plus a tz value."""
    locales = tuple(value for value, _ in req.accept_languages)
    timezone = req.values.get('tz') or default_timezone
    return UserEnvironment(locales=locales, timezone=timezone)


def _focus_index(form):
    """Position in form.elements to refocus after a recalculation, if any.

    Only kept for plain recalculations; add/remove shift the fields.
    """
    focus = form.get('focus', '')
    if form.get('action') != 'calculate' or not focus.isdigit():
        return None
    return int(focus)


def _render(state, focus=None):
    result = state.calculate().to_dict()
    return render_template(
        'calculator.html',
        state=state,
        result=result,
        formatted=format_result(result, state.currency),
        currencies=get_ordered_currencies(current_app.config['ENABLED_CURRENCIES']),
        nisab_grams=NISAB_GRAMS,
        asset_kind=ASSET,
        liability_kind=LIABILITY,
        focus=focus,
    )


@main_bp.route('/', methods=['GET'])
def calculator():
    """Render the calculator with a currency picked from the visitor's locale."""
    env = environment_from_request(request, current_app.config['DEFAULT_TIMEZONE'])
    enabled = current_app.config['ENABLED_CURRENCIES']
    currency = initial_currency(env, enabled)
    current_app.logger.debug(f"Initial currency {currency} for locales={env.locales} tz={env.timezone}")
    return _render(initial_state(currency, enabled))


@main_bp.route('/', methods=['POST'])
def recalculate():
    """Apply the posted edit (currency change, add/remove row) and recompute."""
    enabled = current_app.config['ENABLED_CURRENCIES']
    state = state_from_form(request.form, enabled)
    state = dispatch_all(state, events_from_form(request.form, state, enabled), enabled)
    return _render(state, focus=_focus_index(request.form))
