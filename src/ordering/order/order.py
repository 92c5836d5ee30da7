"""Order aggregate — the header record of one customer purchase.

An Order carries only the customer name, a lifecycle status and timestamps.
The purchased products live in separate OrderLineItem aggregates that point
back at the order through `order_id`; the order service keeps both in step.

Status values mirror a typical order lifecycle:
    RECEIVED → IN PROGRESS → SHIPPED → DELIVERED, or CANCELLED
Only RECEIVED is ever assigned here; the remaining states are declared for
future lifecycle operations.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import Auto, DateTime, String

from ordering.domain import ordering


class OrderStatus(Enum):
    RECEIVED = "RECEIVED"
    IN_PROGRESS = "IN PROGRESS"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


@ordering.aggregate(schema_name="orders")
class Order:
    order_id = Auto(identifier=True, increment=True)
    customer_name = String(required=True, max_length=255)
    status = String(
        choices=OrderStatus,
        default=OrderStatus.RECEIVED.value,
    )
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def receive(cls, customer_name):
        """A freshly placed order, in RECEIVED status with both timestamps set to now.

        `order_id` stays unset until the order is added to its repository.
        """
        now = datetime.now(UTC)
        return cls(
            customer_name=customer_name,
            status=OrderStatus.RECEIVED.value,
            created_at=now,
            updated_at=now,
        )

    # -------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------
    def revise(self, customer_name):
        """Replace the customer name if it changed; `updated_at` is refreshed either way."""
        if customer_name != self.customer_name:
            self.customer_name = customer_name
        self.updated_at = datetime.now(UTC)
