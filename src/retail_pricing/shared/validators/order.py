"""
Order validator.

Checks the structure of an order, its user and its payment and reports every
problem at once. Rules never stop at the first failure: each group (items,
user, payment) produces its own list of messages and the report is their
concatenation in that order.
"""

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from .. import metrics
from ..logging_utils import get_structured_logger
from ..models import ValidationReport, get_field, is_absent, is_number

logger = get_structured_logger(__name__)


@runtime_checkable
class InventoryChecker(Protocol):
    """Read-only stock lookup consulted for each valid order line."""

    def check_stock(self, item_id: str, quantity: Any) -> bool: ...


def _stock_lookup(inventory: Any) -> Callable[[str, Any], Any] | None:
    if inventory is None:
        return None
    # Older callers expose a camelCase checkStock
    for name in ("check_stock", "checkStock"):
        lookup = get_field(inventory, name)
        if callable(lookup):
            return lookup
    return None


class OrderValidator:
    """
    Validates orders, users and payments for completeness.

    Shipping is accepted for signature compatibility but no rule inspects it.
    The optional inventory collaborator only blocks a line when its
    ``check_stock`` returns exactly ``False``. Stock is only consulted for
    lines with an id and a positive numeric quantity; a numeric string such
    as ``"2"`` is reported as an invalid quantity and never reaches the
    collaborator.
    """

    def __init__(self, inventory: InventoryChecker | None = None):
        self.inventory = inventory

    def validate_items(self, order: Any) -> list[str]:
        if is_absent(order):
            return ["Pedido não informado"]

        items = get_field(order, "items")
        if items is None:
            return ["Itens do pedido não informados"]
        if len(items) == 0:
            return ["Pedido sem itens"]

        check_stock = _stock_lookup(self.inventory)
        errors: list[str] = []

        for index, item in enumerate(items):
            if is_absent(item):
                errors.append(f"Item inválido na posição {index}")
                continue

            item_id = get_field(item, "id")
            quantity = get_field(item, "quantity")
            price = get_field(item, "price")

            if not item_id:
                errors.append(f"ID do item não informado (posição {index})")
            if not quantity:
                errors.append(f"Quantidade não informada para item {item_id}")
            if not price:
                errors.append(f"Preço não informado para item {item_id}")
            if not is_number(quantity) or quantity <= 0:
                errors.append(f"Quantidade inválida para item {item_id}")
            if not is_number(price) or price <= 0:
                errors.append(f"Preço inválido para item {item_id}")

            if item_id and is_number(quantity) and quantity > 0 and check_stock:
                if check_stock(item_id, quantity) is False:
                    errors.append(f"Item {item_id} não disponível em estoque")

        return errors

    @staticmethod
    def validate_user(user: Any) -> list[str]:
        if is_absent(user):
            return ["Usuário não informado"]

        errors = []
        if not get_field(user, "id"):
            errors.append("ID do usuário não informado")
        if not get_field(user, "email"):
            errors.append("Email do usuário não informado")
        if not get_field(user, "address"):
            errors.append("Endereço do usuário não informado")
        return errors

    @staticmethod
    def validate_payment(payment: Any) -> list[str]:
        if is_absent(payment):
            return ["Informações de pagamento não fornecidas"]

        errors = []
        amount = get_field(payment, "amount")
        if not get_field(payment, "method"):
            errors.append("Método de pagamento não informado")
        if not amount:
            errors.append("Valor do pagamento não informado")
        # A zero amount is reported both as missing and as invalid
        if is_number(amount) and amount <= 0:
            errors.append("Valor do pagamento inválido")
        return errors

    def validate(
        self, order: Any, user: Any, payment: Any, shipping: Any = None
    ) -> ValidationReport:
        """
        Validate an order, its user and its payment.

        Args:
            order: Order model or mapping with ``items``
            user: User model or mapping
            payment: Payment model or mapping
            shipping: Shipping model or mapping (not inspected)

        Returns:
            ValidationReport listing every error found, in detection order
        """
        errors = [
            *self.validate_items(order),
            *self.validate_user(user),
            *self.validate_payment(payment),
        ]
        report = ValidationReport(errors=errors, warnings=[])

        metrics.record_validation(len(errors))
        if report.is_valid:
            logger.debug("Order validated")
        else:
            logger.info("Order failed validation", error_count=len(errors))
        return report


def validate_order(
    order: Any,
    user: Any,
    payment: Any,
    shipping: Any = None,
    inventory: InventoryChecker | None = None,
) -> ValidationReport:
    """Validate an order with an optional inventory collaborator."""
    return OrderValidator(inventory).validate(order, user, payment, shipping)
