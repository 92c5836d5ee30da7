"""OrderService — create, fetch and update orders against an `OrderStore`.

The service is the only place where an Order header and its line items are
written, so it owns the rules that keep them consistent:

* an order is created with at least one line item, each carrying a valid
  EAN-13 barcode;
* fetching an order returns its line items in insertion order;
* an update edits the existing line items in place and never changes how
  many there are. Input products are matched to stored line items by
  position: the Nth product overwrites the Nth line item, whatever its
  product id was before.

Every gate is checked before the first write, and all writes of one call
share a unit of work.
"""

from collections.abc import Mapping

from protean.exceptions import ObjectNotFoundError, ValidationError

from ordering.order.line_item import OrderLineItem
from ordering.order.order import Order
from ordering.order.store import OrderStore
from ordering.shared.validation import INT32_MAX, is_ean13, is_empty, is_numeric_string
from ordering.utils.logging import get_logger

logger = get_logger(__name__)


def _product_value(product, name):
    if isinstance(product, Mapping):
        return product.get(name)
    return getattr(product, name, None)


def _parse_order_id(order_id) -> int:
    if not is_numeric_string(order_id):
        raise ValidationError({"order_id": ["not a number"]})

    identifier = int(order_id)
    # Identifiers start at 1 and never exceed the INTEGER column.
    if not 1 <= identifier <= INT32_MAX:
        raise ObjectNotFoundError(f"No order with ID {identifier} exists")
    return identifier


def _ensure_customer_name(customer_name):
    if is_empty(customer_name):
        raise ValidationError({"customer_name": ["empty customer name"]})


def _ensure_valid_eans(products):
    for product in products:
        ean = _product_value(product, "product_ean")
        if not is_ean13(ean):
            raise ValidationError({"product_ean": [f"invalid EAN: {ean}"]})


class OrderService:
    def __init__(self, store: OrderStore):
        self.store = store

    def _line_items_of(self, order_id: int) -> list[OrderLineItem]:
        return self.store.select_many(OrderLineItem, order_by="line_item_id", order_id=order_id)

    def create_order(self, customer_name, products) -> int:
        """Persist a new order and one line item per product, in input order.

        Returns the identifier assigned to the order.
        """
        _ensure_customer_name(customer_name)
        if not products:
            raise ValidationError({"products": ["empty product list"]})
        _ensure_valid_eans(products)

        with self.store.transaction():
            order_id = self.store.insert(Order.receive(customer_name=customer_name))

            for product in products:
                self.store.insert(
                    OrderLineItem.record(
                        order_id=order_id,
                        product_id=_product_value(product, "product_id"),
                        product_ean=_product_value(product, "product_ean"),
                        customer_name=customer_name,
                    )
                )

        logger.info("order_created", order_id=order_id, item_count=len(products))
        return order_id

    def fetch_order(self, order_id) -> list[dict]:
        """Line items of an order as plain records, ordered by line item id.

        Only the line-item collection is read; the order header's status and
        timestamps are not part of the result.
        """
        identifier = _parse_order_id(order_id)

        line_items = self._line_items_of(identifier)
        if not line_items:
            raise ObjectNotFoundError(f"No order with ID {identifier} exists")

        logger.debug("order_fetched", order_id=identifier, item_count=len(line_items))
        return [line_item.to_record() for line_item in line_items]

    def update_order(self, order_id, customer_name, products) -> int:
        """Rename the order and overwrite its line items positionally.

        Fails with "count mismatch" when `products` does not have exactly as
        many entries as the order has line items: items cannot be added or
        removed through an update.
        """
        identifier = _parse_order_id(order_id)

        order = self.store.select_one(Order, identifier)
        if is_empty(order.customer_name):
            raise ObjectNotFoundError(f"No order with ID {identifier} exists")

        line_items = self._line_items_of(identifier)
        if not line_items:
            raise ObjectNotFoundError(f"No line items found for order ID {identifier}")

        products = list(products or [])
        if len(line_items) != len(products):
            raise ValidationError({"products": ["count mismatch"]})
        _ensure_customer_name(customer_name)
        _ensure_valid_eans(products)

        with self.store.transaction():
            order.revise(customer_name=customer_name)
            self.store.update(order)

            for line_item, product in zip(line_items, products):
                line_item.revise(
                    product_id=_product_value(product, "product_id"),
                    product_ean=_product_value(product, "product_ean"),
                    customer_name=customer_name,
                )
                self.store.update(line_item)

        logger.info("order_updated", order_id=identifier, item_count=len(line_items))
        return identifier
