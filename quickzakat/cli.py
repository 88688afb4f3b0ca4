"""Flask CLI commands for quick calculations and currency detection."""
import json
import os
from dataclasses import replace
import click
from flask import current_app
from flask.cli import with_appcontext

from quickzakat.constants import DEFAULT_NISAB_BASIS, NISAB_BASES
from quickzakat.data.currencies import get_metal_defaults, get_ordered_currencies, resolve_currency
from quickzakat.services.calc import calculate_zakat
from quickzakat.services.formatting import format_result
from quickzakat.services.locale_detect import detect_currency, environment_from_os, initial_currency


def _os_environment():
    return environment_from_os(os.environ, current_app.config['DEFAULT_TIMEZONE'])


@click.command('calculate')
@click.option('--asset', '-a', 'assets', multiple=True, help='Asset amount (repeatable).')
@click.option('--liability', '-l', 'liabilities', multiple=True, help='Liability amount (repeatable).')
@click.option('--basis', type=click.Choice(NISAB_BASES), default=DEFAULT_NISAB_BASIS, show_default=True)
@click.option('--currency', default=None, help='Currency code (default: detected from locale).')
@click.option('--gold-price', default=None, help='Gold price per gram (default: currency default).')
@click.option('--silver-price', default=None, help='Silver price per gram (default: currency default).')
@click.option('--json', 'as_json', is_flag=True, help='Print the result as JSON.')
@with_appcontext
def calculate_command(assets, liabilities, basis, currency, gold_price, silver_price, as_json):
    """Calculate zakat for the given amounts.

    Example: flask calculate -a 1000 -a 500 -l 200 --basis gold --gold-price 70
    """
    enabled = current_app.config['ENABLED_CURRENCIES']
    if currency is None:
        currency = initial_currency(_os_environment(), enabled)
    else:
        currency = resolve_currency(currency, enabled)

    metal_defaults = get_metal_defaults(currency)
    result = calculate_zakat(
        assets,
        liabilities,
        nisab_basis=basis,
        gold_price=gold_price if gold_price is not None else metal_defaults['gold'],
        silver_price=silver_price if silver_price is not None else metal_defaults['silver'],
    ).to_dict()

    if as_json:
        click.echo(json.dumps({'currency': currency, **result}, indent=2))
        return

    formatted = format_result(result, currency)
    nisab = result['nisab']
    click.echo(f'Currency:          {currency}')
    click.echo(f'Total assets:      {formatted["total_assets"]}')
    click.echo(f'Total liabilities: {formatted["total_liabilities"]}')
    click.echo(f'Net amount:        {formatted["net_amount"]}')
    click.echo(f'Nisab ({nisab["basis_used"]}, {nisab["grams"]}g): {formatted["nisab_threshold"]}')
    click.echo(f'Status:            {result["status"]}')
    click.echo(f'Zakat due:         {formatted["zakat_due"]}')


@click.command('detect-currency')
@click.option('--locale', 'locales', multiple=True, help='Locale tag in priority order (default: LANGUAGE/LC_ALL/LANG).')
@click.option('--timezone', default=None, help='IANA timezone (default: TZ).')
@with_appcontext
def detect_currency_command(locales, timezone):
    """Show which currency the calculator would start with."""
    env = _os_environment()
    if locales:
        env = replace(env, locales=tuple(locales))
    if timezone:
        env = replace(env, timezone=timezone)

    detected = detect_currency(env)
    currency = initial_currency(env, current_app.config['ENABLED_CURRENCIES'])
    defaults = get_metal_defaults(currency)
    click.echo(f'Locales:  {", ".join(env.locales) or "(none)"}')
    click.echo(f'Timezone: {env.timezone or "(none)"}')
    click.echo(f'Detected: {detected}')
    click.echo(f'Currency: {currency} (gold {defaults["gold"]}/g, silver {defaults["silver"]}/g)')


@click.command('list-currencies')
@with_appcontext
def list_currencies_command():
    """List offered currencies and their default metal prices."""
    for info in get_ordered_currencies(current_app.config['ENABLED_CURRENCIES']):
        defaults = info['metal_defaults']
        click.echo(f'{info["code"]}  {info["name"]:<16} gold {defaults["gold"]}/g  silver {defaults["silver"]}/g')


def register_cli(app):
    """Register CLI commands with the Flask app."""
    app.cli.add_command(calculate_command)
    app.cli.add_command(detect_currency_command)
    app.cli.add_command(list_currencies_command)
