"""Calculator form state and the events that change it.

The whole form is an immutable FormState snapshot. Every user action is an
event; dispatch() applies one event to a snapshot and returns a new one.
Line items are plain records kept in insertion order.
"""
from dataclasses import dataclass, field, replace
from typing import Optional

from quickzakat.constants import (
    ASSET,
    DEFAULT_ASSET_LABELS,
    DEFAULT_LIABILITY_LABELS,
    DEFAULT_NISAB_BASIS,
    ITEM_KINDS,
    LIABILITY,
)
from quickzakat.data.currencies import get_metal_defaults, resolve_currency
from quickzakat.services.calc import CalculationResult, calculate_items, normalize_basis

NEW_ITEM_AMOUNT = '0'


@dataclass(frozen=True)
class LineItem:
    kind: str
    amount: str = NEW_ITEM_AMOUNT
    label: str = ''


@dataclass(frozen=True)
class FormState:
    currency: str
    nisab_basis: str = DEFAULT_NISAB_BASIS
    gold_price: str = ''
    silver_price: str = ''
    items: tuple[LineItem, ...] = field(default_factory=tuple)

    @property
    def assets(self) -> list[LineItem]:
        return [item for item in self.items if item.kind == ASSET]

    @property
    def liabilities(self) -> list[LineItem]:
        return [item for item in self.items if item.kind == LIABILITY]

    def calculate(self) -> CalculationResult:
        return calculate_items(
            self.items,
            nisab_basis=self.nisab_basis,
            gold_price=self.gold_price,
            silver_price=self.silver_price,
        )


# Events

@dataclass(frozen=True)
class AddItem:
    kind: str
    label: str = ''


@dataclass(frozen=True)
class RemoveItem:
    kind: str
    position: int


@dataclass(frozen=True)
class EditAmount:
    kind: str
    position: int
    amount: str


@dataclass(frozen=True)
class ChangeCurrency:
    currency: str


@dataclass(frozen=True)
class ChangeBasis:
    nisab_basis: str


@dataclass(frozen=True)
class EditPrice:
    metal: str
    price: str


def _format_price(value: float) -> str:
    return f'{value:g}'


def initial_state(currency: str, enabled: Optional[list[str]] = None) -> FormState:
    """Fresh form for a currency, with its metal defaults and the starter rows."""
    currency = resolve_currency(currency, enabled)
    defaults = get_metal_defaults(currency)
    items = tuple(LineItem(ASSET, '', label) for label in DEFAULT_ASSET_LABELS) + \
        tuple(LineItem(LIABILITY, '', label) for label in DEFAULT_LIABILITY_LABELS)
    return FormState(
        currency=currency,
        gold_price=_format_price(defaults['gold']),
        silver_price=_format_price(defaults['silver']),
        items=items,
    )


def _index_of(state: FormState, kind: str, position: int) -> Optional[int]:
    """Index into state.items of the position-th item of a kind."""
    if position < 0:
        return None
    seen = 0
    for index, item in enumerate(state.items):
        if item.kind != kind:
            continue
        if seen == position:
            return index
        seen += 1
    return None


def add_item(state: FormState, kind: str, label: str = '') -> FormState:
    if kind not in ITEM_KINDS:
        return state
    return replace(state, items=state.items + (LineItem(kind, NEW_ITEM_AMOUNT, label),))


def remove_item(state: FormState, kind: str, position: int) -> FormState:
    index = _index_of(state, kind, position)
    if index is None:
        return state
    return replace(state, items=state.items[:index] + state.items[index + 1:])


def edit_amount(state: FormState, kind: str, position: int, amount: str) -> FormState:
    index = _index_of(state, kind, position)
    if index is None:
        return state
    items = list(state.items)
    items[index] = replace(items[index], amount=amount)
    return replace(state, items=tuple(items))


def change_currency(state: FormState, currency: str, enabled: Optional[list[str]] = None) -> FormState:
    """Switch currency and reset both metal prices to its defaults.

    User edits to the prices are not kept.
    """
    currency = resolve_currency(currency, enabled)
    defaults = get_metal_defaults(currency)
    return replace(
        state,
        currency=currency,
        gold_price=_format_price(defaults['gold']),
        silver_price=_format_price(defaults['silver']),
    )


def dispatch(state: FormState, event, enabled: Optional[list[str]] = None) -> FormState:
    """Apply one event to a snapshot. Unknown events leave it unchanged."""
    if isinstance(event, AddItem):
        return add_item(state, event.kind, event.label)
    if isinstance(event, RemoveItem):
        return remove_item(state, event.kind, event.position)
    if isinstance(event, EditAmount):
        return edit_amount(state, event.kind, event.position, event.amount)
    if isinstance(event, ChangeCurrency):
        return change_currency(state, event.currency, enabled)
    if isinstance(event, ChangeBasis):
        return replace(state, nisab_basis=normalize_basis(event.nisab_basis))
    if isinstance(event, EditPrice):
        if event.metal == 'gold':
            return replace(state, gold_price=event.price)
        if event.metal == 'silver':
            return replace(state, silver_price=event.price)
    return state


def dispatch_all(state: FormState, events, enabled: Optional[list[str]] = None) -> FormState:
    for event in events:
        state = dispatch(state, event, enabled)
    return state


# Form posts

def parse_action(action: Optional[str]):
    """Turn a submit button value into an event.

    'add:asset' -> AddItem, 'remove:liability:2' -> RemoveItem. Anything
    else (including the plain 'calculate' button) gives None.
    """
    if not action:
        return None
    parts = action.split(':')
    if parts[0] == 'add' and len(parts) == 2 and parts[1] in ITEM_KINDS:
        return AddItem(parts[1])
    if parts[0] == 'remove' and len(parts) == 3 and parts[1] in ITEM_KINDS:
        try:
            return RemoveItem(parts[1], int(parts[2]))
        except ValueError:
            return None
    return None


def state_from_form(form, enabled: Optional[list[str]] = None) -> FormState:
    """Rebuild the snapshot a page was rendered with from its posted fields.

    `form` is a werkzeug MultiDict (or anything with get/getlist). The
    currency is read from 'previous_currency' so that a currency change can
    be applied as an event afterwards.
    """
    items = []
    for kind in ITEM_KINDS:
        amounts = form.getlist(f'{kind}_amount')
        labels = form.getlist(f'{kind}_label')
        for position, amount in enumerate(amounts):
            label = labels[position] if position < len(labels) else ''
            items.append(LineItem(kind, amount, label))
    return FormState(
        currency=resolve_currency(form.get('previous_currency') or form.get('currency'), enabled),
        nisab_basis=normalize_basis(form.get('nisab_basis')),
        gold_price=form.get('gold_price', ''),
        silver_price=form.get('silver_price', ''),
        items=tuple(items),
    )


def events_from_form(form, state: FormState, enabled: Optional[list[str]] = None) -> list:
    """Events implied by a posted form: currency change first, then the button."""
    events = []
    requested = form.get('currency')
    if requested and resolve_currency(requested, enabled) != state.currency:
        events.append(ChangeCurrency(requested))
    action_event = parse_action(form.get('action'))
    if action_event is not None:
        events.append(action_event)
    return events
