"""API routes for currencies, locale defaults and calculation."""
from flask import Blueprint, current_app, jsonify, request

from quickzakat.constants import DEFAULT_NISAB_BASIS, NISAB_GRAMS, ZAKAT_RATE
from quickzakat.data.currencies import (
    FALLBACK_CURRENCY,
    get_metal_defaults,
    get_ordered_currencies,
    resolve_currency,
)
from quickzakat.routes.main import environment_from_request
from quickzakat.services.calc import calculate_zakat
from quickzakat.services.formatting import format_result
from quickzakat.services.locale_detect import UserEnvironment, detect_currency, initial_currency

api_bp = Blueprint('api', __name__)


@api_bp.route('/currencies')
def currencies():
    """Return the offered currencies with their default metal prices.

    Returns:
        JSON with currencies list (USD first), the fallback code, nisab
        weights and the zakat rate.
    """
    currency_list = get_ordered_currencies(current_app.config['ENABLED_CURRENCIES'])
    return jsonify({
        'currencies': currency_list,
        'default': FALLBACK_CURRENCY,
        'count': len(currency_list),
        'nisab_grams': NISAB_GRAMS,
        'zakat_rate': ZAKAT_RATE,
    })


@api_bp.route('/defaults')
def defaults():
    """Detect the starting currency and its metal prices.

    Query Parameters:
        locale: Locale tag, may repeat in priority order (default: Accept-Language)
        tz: IANA timezone name (default: QUICKZAKAT_DEFAULT_TIMEZONE)
    """
    enabled = current_app.config['ENABLED_CURRENCIES']
    env = environment_from_request(request, current_app.config['DEFAULT_TIMEZONE'])
    locales = request.args.getlist('locale')
    if locales:
        env = UserEnvironment(locales=tuple(locales), timezone=env.timezone)

    currency = initial_currency(env, enabled)
    return jsonify({
        'currency': currency,
        'detected_currency': detect_currency(env),
        'locales': list(env.locales),
        'timezone': env.timezone,
        'metal_defaults': get_metal_defaults(currency),
        'nisab_basis': DEFAULT_NISAB_BASIS,
    })


@api_bp.route('/calculate', methods=['POST'])
def calculate():
    """Calculate zakat from submitted amounts.

    Request body:
    {
        "currency": "USD",
        "nisab_basis": "gold",
        "gold_price": 70,
        "silver_price": 0.9,
        "assets": [1000, "500"],
        "liabilities": [200]
    }

    Amounts and prices are sanitised (bad values count as 0). Missing prices
    take the currency's defaults; unknown currencies fall back to USD.
    """
    body = request.get_json()
    if body is None:
        body = {}
    if not isinstance(body, dict):
        return jsonify({'error': 'Request body must be a JSON object'}), 400

    for key in ('assets', 'liabilities'):
        if not isinstance(body.get(key, []), list):
            return jsonify({'error': f'{key} must be a list of amounts'}), 400

    enabled = current_app.config['ENABLED_CURRENCIES']
    currency = resolve_currency(body.get('currency', FALLBACK_CURRENCY), enabled)
    metal_defaults = get_metal_defaults(currency)
    gold_price = body.get('gold_price', metal_defaults['gold'])
    silver_price = body.get('silver_price', metal_defaults['silver'])

    result = calculate_zakat(
        body.get('assets', []),
        body.get('liabilities', []),
        nisab_basis=body.get('nisab_basis', DEFAULT_NISAB_BASIS),
        gold_price=gold_price,
        silver_price=silver_price,
    ).to_dict()

    return jsonify({
        'currency': currency,
        **result,
        'formatted': format_result(result, currency),
    })
