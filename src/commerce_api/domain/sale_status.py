"""
Sale status lifecycle.

    CREATED --pay-->    PAID --refund--> REFUNDED
    CREATED --cancel--> CANCELLED

CANCELLED and REFUNDED are terminal.
"""

from enum import Enum
from typing import NamedTuple

from commerce_api.core.exceptions import InvalidRequestError


class SaleStatusCode(str, Enum):
    CREATED = "CREATED"
    PAID = "PAID"
    CANCELLED = "CANCELLED"
    REFUNDED = "REFUNDED"


class SaleAction(str, Enum):
    CANCEL = "cancel"
    PAY = "pay"
    REFUND = "refund"


class Transition(NamedTuple):
    source: SaleStatusCode
    target: SaleStatusCode


TRANSITIONS: dict[SaleAction, Transition] = {
    SaleAction.CANCEL: Transition(SaleStatusCode.CREATED, SaleStatusCode.CANCELLED),
    SaleAction.PAY: Transition(SaleStatusCode.CREATED, SaleStatusCode.PAID),
    SaleAction.REFUND: Transition(SaleStatusCode.PAID, SaleStatusCode.REFUNDED),
}

INITIAL_STATUS = SaleStatusCode.CREATED


def next_status(current: SaleStatusCode | str, action: SaleAction, sale_id: str = "") -> SaleStatusCode:
    """
    Target status of ``action`` applied to a sale in ``current`` status.

    Raises:
        InvalidRequestError: if the sale is not in the status the action requires
    """
    current = SaleStatusCode(current)
    transition = TRANSITIONS[action]
    if current != transition.source:
        raise InvalidRequestError(
            params={"statusCode": f"statusCode is '{current.value}'"},
            message=(
                f"Cannot {action.value} sale '{sale_id}', "
                f"its status is not '{transition.source.value}'."
            ),
        )
    return transition.target


def is_terminal(status: SaleStatusCode | str) -> bool:
    status = SaleStatusCode(status)
    return all(transition.source != status for transition in TRANSITIONS.values())
