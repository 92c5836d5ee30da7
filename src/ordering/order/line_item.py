"""OrderLineItem aggregate — one purchased product of an order.

Line items are stored in their own table, denormalized with the product's
barcode and the customer name so that an order can be read back from a
single collection. `order_id` is a plain reference: no foreign key is
declared, the order service is responsible for keeping it valid.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Auto, DateTime, Integer, String

from ordering.domain import ordering
from ordering.shared.validation import EAN13_LENGTH, is_ean13


@ordering.aggregate(schema_name="order_line_items")
class OrderLineItem:
    line_item_id = Auto(identifier=True, increment=True)
    order_id = Integer(required=True)
    product_id = Integer(required=True)
    product_ean = String(required=True, max_length=EAN13_LENGTH)
    customer_name = String(required=True, max_length=255)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def product_ean_must_be_ean13(self):
        if not is_ean13(self.product_ean):
            raise ValidationError({"product_ean": [f"invalid EAN: {self.product_ean}"]})

    @classmethod
    def record(cls, order_id, product_id, product_ean, customer_name):
        now = datetime.now(UTC)
        return cls(
            order_id=order_id,
            product_id=product_id,
            product_ean=product_ean,
            customer_name=customer_name,
            created_at=now,
            updated_at=now,
        )

    def revise(self, product_id, product_ean, customer_name):
        """Overwrite the product and customer data in place; the row keeps its identity."""
        self.customer_name = customer_name
        self.product_id = product_id
        self.product_ean = product_ean
        self.updated_at = datetime.now(UTC)

    def to_record(self) -> dict:
        """The public view of a line item, as returned when an order is fetched."""
        return {
            "order_id": self.order_id,
            "product_id": self.product_id,
            "product_ean": self.product_ean,
            "customer_name": self.customer_name,
        }
